"""Translation prompts configuration.

These prompts are intentionally in French: they are the translation
instructions sent to every provider, not UI text. The same template is
used for all providers.
"""

from typing import Optional

# Translation directive, followed by the source text
TRANSLATION_PROMPT_TEMPLATE = "Traduire ce texte en {target_language}:\n{text}"

# Optional style instructions, placed before the directive
INSTRUCTIONS_PREFIX_TEMPLATE = "Instructions: {instructions}\n\n"


def build_translation_prompt(
    text: str,
    target_language: str,
    instructions: Optional[str] = None,
) -> str:
    """Build the prompt sent to the provider.

    Values are embedded verbatim, without escaping or truncation.
    """
    prompt = TRANSLATION_PROMPT_TEMPLATE.format(target_language=target_language, text=text)
    if instructions:
        prompt = INSTRUCTIONS_PREFIX_TEMPLATE.format(instructions=instructions) + prompt
    return prompt
