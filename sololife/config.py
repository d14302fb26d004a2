"""Central configuration defaults and constants for SoloLife."""

import os

# LLM Provider Defaults
DEFAULT_LLM_PROVIDER = os.getenv("SOLOLIFE_LLM_PROVIDER", "openai")
DEFAULT_OLLAMA_BASE_URL = os.getenv("SOLOLIFE_OLLAMA_BASE_URL", "http://localhost:11434/")
DEFAULT_OPENAI_BASE_URL = os.getenv("SOLOLIFE_OPENAI_BASE_URL", "https://api.openai.com/v1")
DEFAULT_OPENAI_API_KEY = os.getenv("SOLOLIFE_OPENAI_API_KEY", os.getenv("OPENAI_API_KEY", ""))
DEFAULT_LLM_MODEL = os.getenv("SOLOLIFE_LLM_MODEL", "gpt-4o-mini")
DEFAULT_LLM_TEMPERATURE = float(os.getenv("SOLOLIFE_LLM_TEMPERATURE", "0.7"))
DEFAULT_LLM_TIMEOUT = int(os.getenv("SOLOLIFE_LLM_TIMEOUT", "60"))
DEFAULT_LLM_NUM_CTX = int(os.getenv("SOLOLIFE_LLM_NUM_CTX", str(2**13)))  # Ollama context window

# Ollama doesn't require a real API key, but some clients expect one
DEFAULT_OLLAMA_API_KEY = os.getenv("SOLOLIFE_OLLAMA_API_KEY", "ollama")

# Quest generation
DEFAULT_QUEST_BATCH_SIZE = int(os.getenv("SOLOLIFE_QUEST_BATCH_SIZE", "5"))
DEFAULT_QUEST_MAX_EXP_REWARD = int(os.getenv("SOLOLIFE_QUEST_MAX_EXP_REWARD", "100"))

# Progression curve: threshold(level) = BASE + (level - 1) * STEP
EXP_CURVE_BASE = 100
EXP_CURVE_STEP = 50

# Player defaults
DEFAULT_ATTRIBUTE_VALUE = 5
DEFAULT_LEVEL = 1
DEFAULT_EXP = 0

# Persistence
DEFAULT_PREFERENCES_PATH = os.getenv(
    "SOLOLIFE_PREFERENCES_PATH",
    os.path.join(os.path.expanduser("~"), ".sololife", "preferences.json"),
)

# Notifications kept in memory until drained
DEFAULT_NOTIFICATION_BUFFER_SIZE = int(os.getenv("SOLOLIFE_NOTIFICATION_BUFFER_SIZE", "50"))

# API
DEFAULT_LOG_LEVEL = os.getenv("SOLOLIFE_LOG_LEVEL", "INFO").upper()
DEFAULT_API_PORT = int(os.getenv("SOLOLIFE_API_PORT", "5000"))
DEFAULT_GENERATE_ON_START = os.getenv("SOLOLIFE_GENERATE_ON_START", "true").lower() in ("true", "1", "yes", "on")
