# careerbridge/config.py
import os
from pathlib import Path
from dotenv import load_dotenv

# --- Load env from careerbridge/.env OR .env (whichever exists) ---
# Works whether you run from repo root or careerbridge/
root = Path(__file__).resolve().parents[1]          # project root
package_env = root / "careerbridge" / ".env"
root_env = root / ".env"
if package_env.exists():
    load_dotenv(package_env)
elif root_env.exists():
    load_dotenv(root_env)

# === 🧠 Explanation provider ===
# heuristic | huggingface | openai
EXPLAIN_PROVIDER = os.getenv("EXPLAIN_PROVIDER", "heuristic").strip().lower()
EXPLAIN_TIMEOUT_SECS = float(os.getenv("EXPLAIN_TIMEOUT_SECS", "30"))

# === 🤗 Hugging Face inference ===
# Optional: without a key the remote path simply falls back to the heuristic text.
HUGGINGFACE_API_KEY = os.getenv("HUGGINGFACE_API_KEY")
HF_MODEL = os.getenv("HF_MODEL", "mistralai/Mistral-7B-Instruct-v0.2")
HF_BASE_URL = os.getenv("HF_BASE_URL", "https://router.huggingface.co/hf-inference/models").rstrip("/")
HF_MAX_NEW_TOKENS = int(os.getenv("HF_MAX_NEW_TOKENS", "150"))
HF_TEMPERATURE = float(os.getenv("HF_TEMPERATURE", "0.7"))

# === 💬 OpenAI-compatible chat (Groq by default) ===
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY") or os.getenv("GROQ_API_KEY")
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.groq.com/openai/v1")
CHAT_MODEL = os.getenv("CHAT_MODEL", "llama-3.3-70b-versatile")
MAX_TOKENS = int(os.getenv("MAX_TOKENS", "150"))

# === 🚀 Batch / limits ===
RECOMMEND_CONCURRENCY = int(os.getenv("RECOMMEND_CONCURRENCY", "8"))
JOB_RECOMMENDATION_LIMIT = int(os.getenv("JOB_RECOMMENDATION_LIMIT", "10"))
RESOURCE_RECOMMENDATION_LIMIT = int(os.getenv("RESOURCE_RECOMMENDATION_LIMIT", "10"))
ROLE_JOB_LIMIT = int(os.getenv("ROLE_JOB_LIMIT", "5"))
GAP_RESOURCE_LIMIT = int(os.getenv("GAP_RESOURCE_LIMIT", "10"))

# === ⚖️ Scoring knobs ===
EXTRA_SKILL_BONUS_CAP = float(os.getenv("EXTRA_SKILL_BONUS_CAP", "10"))

# === 📝 Logging ===
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
