"""Echo backend for mobile frontends.

Run with `python backend_runner.py` or `uvicorn mobile_backend.main:app --port 3000`.
"""
