from typing import Any, Iterator


def iter_value_options(value_options: dict | list | None) -> Iterator[tuple[Any, dict]]:
    """
    Normalise select / multi checkbox options into ``(key, spec)`` pairs.

    Accepted shapes::

        {"1": "One", "2": {"label": "Two", "disabled": True}}
        ["One", "Two"]                                  # value and label are the string
        [("1", "One"), {"value": "2", "label": "Two"}]
        [{"label": "Group", "options": {...}}]           # optgroup, "group" works as well
    """
    if not value_options:
        return

    if isinstance(value_options, dict):
        for key, option in value_options.items():
            match option:
                case dict():
                    spec = dict(option)
                    if "options" in spec:
                        spec.setdefault("label", spec.pop("group", key))
                    else:
                        spec.setdefault("value", key)
                case _:
                    spec = {"value": key, "label": option}
            yield key, spec
        return

    for index, option in enumerate(value_options):
        match option:
            case dict():
                spec = dict(option)
                if "group" in spec:
                    spec.setdefault("label", spec.pop("group"))
                if "options" not in spec:
                    spec.setdefault("value", "")
                yield index, spec
            case (value, label):
                yield index, {"value": value, "label": label}
            case _:
                yield index, {"value": option, "label": option}


def selected_values(value: Any) -> set[str]:
    """The element value(s) as strings, for membership tests against option values."""
    if value is None:
        return set()
    if isinstance(value, (list, tuple, set)):
        return {str(item) for item in value}
    return {str(value)}
