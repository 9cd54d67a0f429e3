import calendar
import re
from typing import Self

from bootstrap_form.form.DateSelect import DateSelect, DateTimeSelect, MonthSelect
from bootstrap_form.form.Element import Element
from bootstrap_form.form.Exceptions import DomainError, InvalidArgumentError
from bootstrap_form.view.AbstractHelper import AbstractHelper, EOL
from bootstrap_form.view.FormSelect import FormSelect

DEFAULT_DATE_PATTERN = "d MMMM y"
DEFAULT_DATE_TIME_PATTERN = "d MMMM y HH:mm:ss"

# literal runs like " 'at' " or plain separators split the pattern into parts
DELIMITER_RE = re.compile(r"((?:[ \-,./:]*'[^']*'[ \-,./:]*)|[ \-,./:]+)")


def _format_number(value: int, token: str) -> str:
    return f"{value:02d}" if len(token) >= 2 else str(value)


class FormMonthSelect(AbstractHelper):
    """
    Renders the month and year selects of a ``MonthSelect``.

    The order and the separators come from a date pattern (``d``, ``M``, ``y``
    tokens, ``'quoted'`` literals). The output starts and ends with a line
    break so the selects sit on their own lines inside a row.
    """

    element_class = MonthSelect
    parts = ("month", "year")
    default_pattern = DEFAULT_DATE_PATTERN

    def __init__(self):
        super().__init__()
        self.pattern: str | None = None
        self.select_helper: FormSelect | None = None

    def set_pattern(self, pattern: str) -> Self:
        self.pattern = pattern
        return self

    def get_pattern(self) -> str:
        return self.pattern or self.default_pattern

    def get_select_helper(self) -> FormSelect:
        if self.select_helper is None:
            self.select_helper = self.plugin("form_select", FormSelect)
        return self.select_helper

    def set_select_helper(self, helper: FormSelect) -> Self:
        self.select_helper = helper
        return self

    def classify(self, token: str) -> str | None:
        if "'" in token:
            return None
        lowered = token.lower()
        if "d" in lowered:
            return "day"
        if "M" in token:
            return "month"
        if "y" in lowered:
            return "year"
        return None

    def parse_pattern(self, render_delimiters: bool = True) -> list[tuple[str | int, str]]:
        """``[("day", "d"), (0, " "), ("month", "MMMM"), ...]``; ints mark delimiters."""
        result = []
        delimiter_index = 0
        for token in DELIMITER_RE.split(self.get_pattern()):
            if token == "":
                continue
            part = self.classify(token)
            if part is not None:
                result.append((part, token))
            elif render_delimiters:
                result.append((delimiter_index, token.replace("'", "")))
                delimiter_index += 1
        return result

    def check_element(self, element: Element) -> None:
        if not isinstance(element, self.element_class):
            raise InvalidArgumentError(
                f"{type(self).__name__}.render requires that the element is of type "
                f"{self.element_class.__name__}, but was {type(element).__name__}"
            )
        if not element.get_name():
            raise DomainError(
                f"{type(self).__name__}.render requires that the element has an assigned name; none discovered"
            )

    def select_pattern(self, element: Element) -> list[tuple[str | int, str]]:
        # the date pattern always starts with the day and its separator
        pattern = self.parse_pattern(element.should_render_delimiters())
        return [(key, value) for key, value in pattern if key not in ("day", 0)]

    def render(self, element: Element) -> str:
        self.check_element(element)
        pattern = self.select_pattern(element)
        tokens = {key: value for key, value in pattern if isinstance(key, str)}

        select_helper = self.get_select_helper()
        indent = self.get_indent()
        select_helper.set_indent(indent)

        rendered = {}
        for part in self.parts:
            if part not in tokens:
                continue
            sub_element = getattr(element, f"get_{part}_element")()
            sub_element.set_value_options(self.get_options(part, tokens[part], element))
            if element.should_create_empty_option():
                sub_element.set_empty_option("")
            rendered[part] = select_helper.render(sub_element)

        markups = []
        for key, value in pattern:
            if isinstance(key, int):
                markups.append(indent + value)
            elif key in rendered:
                markups.append(rendered[key])

        return indent + EOL + EOL.join(markups) + EOL + indent

    def get_options(self, part: str, token: str, element: Element) -> dict:
        match part:
            case "day":
                return self.get_days_options(token)
            case "month":
                return self.get_months_options(token)
            case "year":
                return self.get_years_options(element.get_min_year(), element.get_max_year(), token)
            case "hour":
                return self.get_range_options(24, token)
            case "minute" | "second":
                return self.get_range_options(60, token)
        return {}

    @staticmethod
    def get_days_options(token: str) -> dict:
        return {
            f"{day:02d}": {"value": f"{day:02d}", "label": _format_number(day, token)}
            for day in range(1, 32)
        }

    @staticmethod
    def get_months_options(token: str) -> dict:
        options = {}
        for month in range(1, 13):
            if len(token) >= 4:
                label = calendar.month_name[month]
            elif len(token) == 3:
                label = calendar.month_abbr[month]
            else:
                label = _format_number(month, token)
            options[f"{month:02d}"] = {"value": f"{month:02d}", "label": label}
        return options

    @staticmethod
    def get_years_options(min_year: int, max_year: int, token: str = "y") -> dict:
        options = {}
        for year in range(max_year, min_year - 1, -1):
            label = f"{year % 100:02d}" if len(token) == 2 else str(year)
            options[str(year)] = {"value": str(year), "label": label}
        return options

    @staticmethod
    def get_range_options(count: int, token: str) -> dict:
        return {
            f"{value:02d}": {"value": f"{value:02d}", "label": _format_number(value, token)}
            for value in range(count)
        }


class FormDateSelect(FormMonthSelect):
    element_class = DateSelect
    parts = ("day", "month", "year")

    def select_pattern(self, element: Element) -> list[tuple[str | int, str]]:
        return self.parse_pattern(element.should_render_delimiters())


class FormDateTimeSelect(FormDateSelect):
    element_class = DateTimeSelect
    parts = ("day", "month", "year", "hour", "minute", "second")
    default_pattern = DEFAULT_DATE_TIME_PATTERN

    def classify(self, token: str) -> str | None:
        part = super().classify(token)
        if part is not None or "'" in token:
            return part
        if "h" in token.lower():
            return "hour"
        if "m" in token:
            return "minute"
        if "s" in token:
            return "second"
        return None

    def select_pattern(self, element: Element) -> list[tuple[str | int, str]]:
        render_delimiters = element.should_render_delimiters()
        pattern = self.parse_pattern(render_delimiters)
        if element.should_show_seconds() and any(key == "second" for key, _ in pattern):
            return pattern
        # drop the seconds and the separator in front of them
        return [(key, value) for key, value in pattern if key not in ("second", 4)]
