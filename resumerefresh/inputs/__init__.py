from resumerefresh.inputs.credentials import load_credentials
from resumerefresh.inputs.resume import find_resume_file, resume_locator

__all__ = ["find_resume_file", "load_credentials", "resume_locator"]
