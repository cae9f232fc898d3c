"""Plain-text presentation of enquiries: card grid, table and detail view."""

from datetime import datetime

from enquiries.links import normalize_url

CARD_WIDTH = 36
GRID_COLUMNS = 3


def initials(name):
    return "".join(word[0] for word in name.split() if word).upper()[:2]


def parse_timestamp(value):
    if isinstance(value, datetime):
        return value
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def format_date(value):
    return parse_timestamp(value).strftime("%b %d, %Y")


def format_timestamp(value):
    return parse_timestamp(value).strftime("%B %d, %Y at %I:%M %p")


def format_budget(value):
    if float(value).is_integer():
        return f"${int(value):,}"
    return f"${value:,.2f}"


def truncate(text, width):
    text = " ".join(str(text).split())
    if len(text) <= width:
        return text
    return text[: width - 3] + "..."


def render_card(record):
    inner = CARD_WIDTH - 4
    lines = [
        f"[{initials(record['clientName'])}] {truncate(record['clientName'], inner - 5)}",
        truncate(record["projectName"], inner),
        truncate(record["description"], inner),
        f"{format_budget(record['budget'])} | {record['phone']}",
        f"{format_date(record['createdAt'])} | #{record['id']}",
    ]
    border = "+" + "-" * (CARD_WIDTH - 2) + "+"
    return [border] + [f"| {line.ljust(inner)} |" for line in lines] + [border]


def render_grid(records, columns=GRID_COLUMNS):
    if not records:
        return "No enquiries found"
    rows = []
    for start in range(0, len(records), columns):
        cards = [render_card(record) for record in records[start : start + columns]]
        for lines in zip(*cards):
            rows.append("  ".join(lines))
    return "\n".join(rows)


TABLE_COLUMNS = (
    ("ID", lambda r: str(r["id"])),
    ("Client", lambda r: truncate(r["clientName"], 24)),
    ("Project", lambda r: truncate(r["projectName"], 24)),
    ("Budget", lambda r: format_budget(r["budget"])),
    ("Submitted", lambda r: format_date(r["createdAt"])),
)


def render_table(records):
    if not records:
        return "No enquiries found"
    headers = [title for title, _ in TABLE_COLUMNS]
    rows = [[cell(record) for _, cell in TABLE_COLUMNS] for record in records]
    widths = [max(len(row[i]) for row in [headers] + rows) for i in range(len(headers))]

    def line(cells):
        return " | ".join(cell.ljust(width) for cell, width in zip(cells, widths))

    separator = "-+-".join("-" * width for width in widths)
    return "\n".join([line(headers), separator] + [line(row) for row in rows])


def render_detail(record):
    lines = [
        f"{record['projectName']}",
        f"Client:      {record['clientName']}",
        f"Phone:       {record['phone']}",
        f"Budget:      {format_budget(record['budget'])}",
        "",
        "Description:",
        record["description"],
    ]
    links = record.get("links") or []
    if links and not isinstance(links, str):
        lines += ["", "Links:"]
        lines += [f"  - {normalize_url(link)}" for link in links]
    lines += ["", f"Submitted on {format_timestamp(record['createdAt'])}"]
    return "\n".join(lines)
