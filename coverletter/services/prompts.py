from __future__ import annotations

from typing import Sequence

SYSTEM_PROMPT = (
    "You are an elite professional cover letter writer with extensive experience in HR and "
    "recruitment. You create compelling, personalized cover letters that stand out to hiring "
    "managers and significantly increase interview rates. Your writing is sophisticated yet "
    "authentic, strategic yet human."
)

TONE_OPTIONS: tuple[str, ...] = (
    "Professional & Formal",
    "Friendly & Conversational",
    "Bold & Assertive",
    "Problem-Solution Focused",
    "Direct to Hiring Manager / Formal to HR",
)

REFINEMENT_INSTRUCTIONS: dict[str, str] = {
    "strengthen-opener": (
        "Rewrite the opening paragraph with a sharper hook that shows immediate understanding "
        "of the company and the role. Keep the rest of the letter close to the original."
    ),
    "achievement-focused": (
        "Reframe the body paragraphs around concrete, quantified achievements. Prefer numbers, "
        "percentages and outcomes over responsibilities."
    ),
    "make-more-compelling": (
        "Make the letter more persuasive: tighten weak sentences, add specific examples and "
        "strengthen the call-to-action."
    ),
    "optimize-length": (
        "Adjust the letter to between 300 and 600 words. Cut repetition and filler while keeping "
        "every key skill and achievement."
    ),
}

_REQUIREMENTS = (
    "Open with a compelling hook that immediately shows understanding of the company/role",
    "Include 2-3 detailed paragraphs with specific examples and quantifiable achievements",
    "Address the company's needs and pain points directly",
    "Show genuine enthusiasm and cultural fit",
    "Include a strong call-to-action in the closing",
    "Use active voice and varied sentence structure",
    "Avoid generic phrases and clichés",
    "Make it sound authentic and personally written, not AI-generated",
    "End with a professional but warm closing",
)


def _bullets(lines: Sequence[str]) -> str:
    return "".join(f"• {line}\n" for line in lines)


def build_cover_letter_prompt(
    job_description: str,
    tone: str,
    key_strength: str | None,
    keywords: Sequence[str],
    *,
    refinement_type: str | None = None,
    existing_letter: str | None = None,
) -> str:
    """Build the user prompt for a new letter, or for refining an existing one.

    Refinement only kicks in when both a known refinement type and a non-blank
    existing letter are given; otherwise a fresh letter is requested.
    """
    refining = bool(
        refinement_type in REFINEMENT_INSTRUCTIONS and existing_letter and existing_letter.strip()
    )

    prompt = (
        "Create a highly compelling and personalized cover letter for the following job description. "
        "This letter should be comprehensive, sophisticated, and significantly longer than typical cover "
        "letters to showcase deep understanding and enthusiasm.\n\n"
    )
    prompt += f"JOB DESCRIPTION:\n{job_description}\n\n"

    prompt += "WRITING INSTRUCTIONS:\n"
    prompt += _bullets(
        [
            f"Tone: {tone}",
            "Length: Write a comprehensive letter (800-1200 words) that thoroughly addresses the role",
            "Structure: Strong opening hook, detailed body paragraphs with specific examples, compelling closing",
            "Style: Professional yet engaging, confident but not arrogant, authentic and human",
        ]
    )
    prompt += "\n"

    if keywords:
        prompt += f"KEY SKILLS TO INTEGRATE NATURALLY:\n{', '.join(keywords)}\n\n"

    if key_strength and key_strength.strip():
        prompt += f"HIGHLIGHT THIS ACHIEVEMENT/STRENGTH:\n{key_strength}\n\n"

    prompt += "REQUIREMENTS:\n"
    prompt += _bullets(_REQUIREMENTS)
    prompt += "\n"

    if refining:
        prompt += f"CURRENT COVER LETTER:\n{existing_letter}\n\n"
        prompt += f"REFINEMENT REQUEST:\n{REFINEMENT_INSTRUCTIONS[refinement_type]}\n\n"
        prompt += "Write the refined cover letter now:"
    else:
        prompt += "Write the complete cover letter now:"

    return prompt
