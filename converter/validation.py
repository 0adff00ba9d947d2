from project.settings import MAX_INPUT


def valid_input(value, limit=MAX_INPUT):
    if not isinstance(value, str):
        return "Value must be text"
    elif len(value) > limit:
        return f"Share fewer than {limit} characters"
