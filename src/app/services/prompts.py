"""Prompt templates for report analysis and draft correspondence."""

from collections.abc import Sequence

from src.app.schemas.project import IssueInput, ProjectDetails

REPORT_SYSTEM_PROMPT = (
    "You are a UK construction contract expert. Provide detailed, accurate information "
    "about construction contract clauses and recommendations based on the given scenario. "
    "Use proper formatting with clear headings and paragraphs. Do not use markdown symbols "
    "like # or * in your response. Format your text with proper headings, paragraphs, and "
    "use bold for emphasis where appropriate."
)

PLAIN_TEXT_RULES = """IMPORTANT FORMATTING INSTRUCTIONS:
- DO NOT use markdown symbols such as hashtags (#) or asterisks (*) in your response
- Use clear headings and proper paragraphs with adequate spacing
- Write numbered or bulleted lists out as "1." or "•" instead of markdown
- Present the text in a clean, professional format that can be printed or sent directly"""


def format_issues(issues: Sequence[IssueInput]) -> str:
    """Render issues as numbered 'Issue N' / 'Action taken to date' blocks."""
    blocks = [
        f"Issue {index}: {issue.description}\n"
        f"Action taken to date: {issue.action_taken or 'None'}"
        for index, issue in enumerate(issues, start=1)
    ]
    return "\n\n".join(blocks)


def build_report_prompt(details: ProjectDetails, issues: Sequence[IssueInput]) -> str:
    """Build the user prompt for the issue analysis report."""
    return f"""Please analyze the following construction contract issue and \
provide detailed guidance:

Project Name: {details.project_name}
Project Description: {details.project_description}
Form of Contract: {details.form_of_contract.value}
Organization Role: {details.organization_role.value}

Issues to be explored:

{format_issues(issues)}

Based on the information provided, please provide:

1. A detailed analysis of the relevant contract clauses that apply to these issues.
2. Specific guidance on what actions should be taken under the relevant clauses.
3. References to all relevant contract clauses with accurate and current details.
4. Any warnings or special considerations based on the role of the organization.

{PLAIN_TEXT_RULES}

Please format your response as a professional document that can be directly printed or \
shared with clients."""


def build_draft_communication_prompt(
    details: ProjectDetails,
    issues: Sequence[IssueInput],
    report: str,
) -> str:
    """Build the prompt for correspondence written from the user's own role.

    The role constraint lives only in this text; the model is trusted to obey it.
    """
    role = details.organization_role.value
    return f"""You are a UK construction contract expert. Create a professional communication \
draft based on the details provided, written strictly from the perspective of the user's \
stated role. Use proper business letter formatting with clear paragraphs and proper emphasis.

Please draft a professional communication in UK English format (formal letter or email) \
regarding the following construction contract issue:

Project Name: {details.project_name}
Organization Role: {role} (THIS IS YOUR ROLE - YOU ARE WRITING AS THIS ROLE)
Form of Contract: {details.form_of_contract.value}

Issues:

{format_issues(issues)}

The analysis of the issues determined:
{report}

VERY IMPORTANT: This communication must be written strictly from the perspective of a {role}. \
Do not include any statements, advice, or language that would be inappropriate or unusual for \
someone in this role to say to the other party. For example, if you are an Employer/Client, do \
not recommend that the contractor seek legal advice or prepare for disputes. Instead, state \
your position clearly and professionally.

Please create a well-structured, professional communication that:
1. Is written ONLY from the perspective of a {role}
2. Follows UK business letter/email standards
3. Is formal but clear
4. References the relevant contract clauses
5. States the position based on the above analysis
6. Proposes specific next steps or requests that are appropriate for your role
7. Maintains a professional tone throughout
8. Uses language and phrasing that a {role} would actually use

{PLAIN_TEXT_RULES}
- Include all necessary parts of a formal business letter (date, address, salutation, etc.)

Format it as a ready-to-use professional communication that I can send directly as a {role}."""
