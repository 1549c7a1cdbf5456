"""
Configuration module for the ping sweep.
Provides loading and validation of sweep_config.yml.
"""

from .config_loader import ConfigLoader, SweepConfig

__all__ = ['ConfigLoader', 'SweepConfig']
