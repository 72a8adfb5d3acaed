import os


COMPLETION_URL = os.getenv("OPENAI_API_URL", "https://api.openai.com/v1/chat/completions")
LLM_MODEL = os.getenv("LLM_MODEL", "gpt-4")

MAX_TOKENS = 1000
STUDY_GUIDE_LIMIT = 1000
MAX_WORKERS = 4

PDF_CONTENT_TYPE = "application/pdf"

SYSTEM_PROMPT = "You are a helpful AI assistant that creates study plans."
