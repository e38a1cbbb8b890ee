"""This package contain modules related to large language models (LLMs).
openai.py : Contain Azure OpenAI client initialization
prompts.py : Contain instruction prompts
generators.py : Contain the calls producing each podcast artifact
exceptions.py : Contain the generation error type
"""

from .exceptions import GenerationError
from .generators import PodcastContentGenerator, split_for_speech
from .openai import init_llm_openai


__all__ = [
    "GenerationError",
    "PodcastContentGenerator",
    "split_for_speech",
    "init_llm_openai",
]
