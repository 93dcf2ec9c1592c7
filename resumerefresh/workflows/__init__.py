from resumerefresh.workflows.naukri import STEPS as NAUKRI_STEPS

__all__ = ["NAUKRI_STEPS"]
