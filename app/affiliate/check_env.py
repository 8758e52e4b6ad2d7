import json
import os
import sys
from pathlib import Path
from typing import List, Tuple

from dotenv import load_dotenv


def _vertex_problems(env) -> List[str]:
    creds_path = env.get("GOOGLE_APPLICATION_CREDENTIALS")
    if not creds_path:
        return []
    creds_file = Path(creds_path)
    if not creds_file.exists():
        return [f"Credentials file not found: {creds_path}"]
    try:
        with open(creds_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        return [f"Credentials file is not valid JSON: {e}"]
    if data.get("type") != "service_account":
        return ["Credentials JSON is not a service_account key"]
    return []


def check(env) -> Tuple[List[str], List[str]]:
    """
    Validate credentials from a mapping of environment variables.
    Returns (problems, warnings); no problems means the app can reach Gemini in some mode.
    """
    api_key = env.get("GOOGLE_API_KEY") or env.get("API_KEY")
    project = env.get("GCP_PROJECT")

    if not api_key and not project:
        return ["Missing GOOGLE_API_KEY (public API) or GCP_PROJECT (Vertex AI) in .env"], []

    problems = _vertex_problems(env) if project else []
    if problems and api_key:
        # Vertex is broken but the public API is still usable
        return [], [f"{p} (falling back to GOOGLE_API_KEY)" for p in problems]
    return problems, []


def main():
    load_dotenv()

    print("=== Gemini credentials check ===")
    print(f"GCP_PROJECT: {os.getenv('GCP_PROJECT') or '-'}")
    print(f"GCP_LOCATION: {os.getenv('GCP_LOCATION') or 'global'}")
    print(f"GOOGLE_API_KEY: {'set' if (os.getenv('GOOGLE_API_KEY') or os.getenv('API_KEY')) else '-'}")

    problems, warnings = check(os.environ)
    for w in warnings:
        print(f"⚠️ {w}")
    if problems:
        for p in problems:
            print(f"❌ {p}")
        sys.exit(1)
    print("✅ Credentials look usable.")


if __name__ == "__main__":
    main()
