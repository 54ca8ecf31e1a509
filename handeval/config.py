import os

API_TITLE = os.getenv("HANDEVAL_API_TITLE", "Poker Hand Evaluator")
LOG_LEVEL = os.getenv("HANDEVAL_LOG_LEVEL", "INFO").upper()
MAX_BATCH_SIZE = int(os.getenv("HANDEVAL_MAX_BATCH_SIZE", "100"))
