"""SkillSprout backend - FastAPI app entry point (``uvicorn skillsprout.main:app``)."""
from skillsprout.factory import create_app

app = create_app()
