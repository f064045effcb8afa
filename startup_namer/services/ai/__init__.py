# AI services - Gemini API integration
from .client import GeminiClient
from .parser import parse_name_candidates, strip_code_fences
from .prompt import build_name_prompt

__all__ = ["GeminiClient", "parse_name_candidates", "strip_code_fences", "build_name_prompt"]
