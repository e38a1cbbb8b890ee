"""
Podcastr - turn a web page into a packaged podcast episode.

Subpackages:
    ingestion: Web page fetching and text cleaning
    llm: Azure OpenAI client and content generators
    pipeline: Stage execution, validation gates and the run orchestrator
    storage: Episode archive building and temp-file output
    usage: Usage counters and cost reporting
    logger: Logging setup and decorators
"""

__version__ = "0.1.0"
