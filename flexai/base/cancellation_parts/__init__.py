"""Implementation modules behind ``flexai.base.cancellation``."""
