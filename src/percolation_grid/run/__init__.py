"""Run definition and orchestration of threshold sweeps."""

from .config import RunConfig
from .orchestrator import RunOrchestrator, run_from_config

__all__ = ['RunConfig', 'RunOrchestrator', 'run_from_config']
