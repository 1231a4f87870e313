"""
Prompt templates for each summarization level.

The wording is fixed; downstream tooling and tests compare prompts verbatim.
"""

from enum import Enum


class PromptKind(Enum):
    """Which level of the summary hierarchy a request belongs to."""
    BASE_SUMMARY = "base_summary"
    SECTION_SUMMARY = "section_summary"
    CHAPTER_SUMMARY = "chapter_summary"
    EXECUTIVE_SUMMARY = "executive_summary"


PROMPT_TEMPLATES = {
    PromptKind.BASE_SUMMARY: "Summarize the following text from page {page}:\n\n{text}",
    PromptKind.SECTION_SUMMARY: "Create a concise summary of the following section:\n\n{text}",
    PromptKind.CHAPTER_SUMMARY: "Provide a comprehensive summary of this chapter:\n\n{text}",
    PromptKind.EXECUTIVE_SUMMARY: (
        "Create an executive summary of the entire document "
        "based on these chapter summaries:\n\n{text}"
    ),
}


def build_prompt(text: str, kind: PromptKind, metadata: dict | None = None) -> str:
    """
    Fill the template for `kind` with the text to summarize.

    Args:
        text: Page text or joined lower-level summaries.
        kind: Summary level being requested.
        metadata: For BASE_SUMMARY, must contain 'page' (1-based page number).

    Returns:
        The complete single-turn prompt.

    Raises:
        ValueError: If a base summary is requested without a page number.
    """
    template = PROMPT_TEMPLATES[kind]
    if kind is PromptKind.BASE_SUMMARY:
        page = (metadata or {}).get('page')
        if page is None:
            raise ValueError("Base summaries need a 'page' entry in metadata")
        return template.format(page=page, text=text)
    return template.format(text=text)
