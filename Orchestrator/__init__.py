__version__ = "1.0.0"

DISTRIBUTION_NAME = "powerstig-orchestrator"
