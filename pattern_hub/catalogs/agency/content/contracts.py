SECTIONS = [
    ("Project Overview", "Client background, goals and the problem being solved."),
    ("Scope of Work", "Features and deliverables included. Anything not listed is out of scope."),
    ("Timeline", "Phases with start and end dates and the milestone that closes each phase."),
    ("Deliverables", "Source code, deployed environments, documentation and training."),
    ("Payment Terms", "Milestone-based invoices, net 15."),
    ("Change Requests", "Written request, impact estimate, signed approval before work starts."),
    ("Acceptance", "Five business days to review each milestone before it is deemed accepted."),
]


def render_sow_template() -> str:
    lines = ["# Statement of Work Template", ""]
    for number, (title, body) in enumerate(SECTIONS, start=1):
        lines.append(f"## {number}. {title}")
        lines.append(body)
        lines.append("")
    return "\n".join(lines)
