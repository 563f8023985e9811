"""
Prompt for the generation backend.

The formatting rules here define the markup the layout engine understands.
"""

from __future__ import annotations

SYSTEM_INSTRUCTION = """You are an expert career advisor and an exceptionally creative professional writer.
Your sole task is to generate ONLY the text for a professional cover letter as described below.
Adhere strictly to all formatting and content guidelines. Do NOT include any conversational preamble,
self-correction, or any text that is not part of the cover letter itself.
The output MUST start directly with the cover letter content (e.g., a subject line or salutation).
The output MUST end directly with the cover letter closing phrase.
Output ONLY the cover letter."""

INTRO = """
Generate a highly compelling, modern, and personalized cover letter for {name}.
The tone should be confident, enthusiastic, and engaging, less like a stuffy traditional document and more like a direct, personable message that showcases personality.
Avoid clichés and overly formal phrases. If appropriate for the role and company, consider a brief, relevant storytelling element or a strong hook in the introduction.

Crucially, the entire cover letter, including all creative elements, formatting, and bullet points, MUST be extremely concise. Aim for a total word count of 220-320 words. The final output must comfortably fit on a single A4 page in PDF format with standard margins and specified font sizes (body text around 10.5pt).

The cover letter should be based on the following job description:
--- JOB DESCRIPTION START ---
{job_description}
--- JOB DESCRIPTION END ---
"""

RESUME_BLOCK = """
And the following resume:
--- RESUME START ---
{resume}
--- RESUME END ---

When using the resume, focus on extracting relevant skills, experiences, and achievements that align with the job description.
"""

NO_RESUME_BLOCK = """
The candidate has not provided a resume. Generate the cover letter based on the job description, making general inferences about skills where appropriate, but lean into the creative and enthusiastic aspects.
"""

PORTFOLIO_BLOCK = """
The candidate has provided a personal website/portfolio: {website}.
Review this site. If it showcases a clear learning journey, unique projects, or a blog that powerfully reflects their passion and skills relevant to the role, weave this in naturally. If the portfolio content is strong and central to their candidacy for *this specific role*, you *may* consider creating a very brief, distinct section for it using a markdown heading like '## Portfolio Highlights:' or '## A Glimpse of My Work:', but only if it enhances the letter significantly and fits the strict single-page conciseness.
"""

FORMAT_RULES = """
Cover Letter Formatting and Content Rules (Strictly Follow):
1. Start DIRECTLY with the cover letter content (e.g., Subject line, or "Dear [Hiring Manager],"). NO PREAMBLE.
2. Clearly state the position being applied for (if discernible from the description).
3. Highlight how {name}'s skills and experience match the job requirements in a creative, non-formulaic way.
4. Express genuine enthusiasm for the role and the company.
5. Maintain a professional yet dynamic and unique voice.
6. Be impeccably structured for readability and visual appeal in the final PDF. This includes an introduction, body, and conclusion.
7. For distinct sections (e.g., highlights, value proposition, or the optional portfolio snapshot), start the line for the section title with '## ' followed by the title (e.g., '## Key Strengths I Offer:').
8. For bullet points, start each bullet line with a hyphen "-" or asterisk "*" followed by a space (e.g., "- My skill" or "* Another skill"). Ensure bulleted lists are clearly delineated and the points themselves are concise.
9. For emphasis on key skills or achievements within paragraphs or bullet points, use markdown bold like **this** or __this__. Do not use bold for '##' section titles.
10. If a strong visual break is needed and fits the creative tone, insert a line containing only '---***---'. This will be rendered as a prominent graphical separator. Use sparingly (at most once or twice).
11. Conclude with a professional closing phrase such as "Sincerely," or "Warm regards,". Do NOT add a name after the closing phrase.
12. Ensure the ENTIRE output is ONLY the cover letter content itself, adhering to the single-page conciseness. NO EXTRA TEXT.

Begin Cover Letter Content Now:
"""


def build_prompt(full_name: str, job_description: str, resume: str = "", website: str = "") -> str:
    """Combine the system instruction and the user prompt into one string."""
    name = full_name.strip()
    user_prompt = INTRO.format(name=name, job_description=job_description.strip())

    if resume.strip():
        user_prompt += RESUME_BLOCK.format(resume=resume.strip())
    else:
        user_prompt += NO_RESUME_BLOCK

    if website.strip():
        user_prompt += PORTFOLIO_BLOCK.format(website=website.strip())

    user_prompt += FORMAT_RULES.format(name=name)
    return f"{SYSTEM_INSTRUCTION}\n\n{user_prompt}"
