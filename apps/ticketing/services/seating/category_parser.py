"""Category field extraction for seating exports."""


def extract_category(category_field: str) -> str:
    """
    Extract the category label from a ``<code>:<label>`` field.
    
    Examples:
        "1:Sitzplatz" -> "Sitzplatz"
        "2:Stehplatz Innenraum" -> "Stehplatz Innenraum"
        "Sitzplatz" -> "Sitzplatz"
    """
    _, colon, label = category_field.partition(':')
    if colon:
        return label.strip()
    return category_field.strip()
