from falcon import HTTPBadRequest


def get_input(form, field="input"):
    value = form.get(field)
    if value is None:
        raise HTTPBadRequest(
            title="Missing field", description=f"Form field '{field}' is required"
        )
    if isinstance(value, list):
        value = value[-1]
    return value
