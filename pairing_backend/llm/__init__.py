"""
LLM integration layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Build the sommelier prompt from the dish and the drink catalogue.
- Call Groq LLM to analyse the dish and pick drink pairings.
- Return None when the LLM is unavailable or its output is unusable,
  so the caller can switch to the rule-based fallback.
"""
