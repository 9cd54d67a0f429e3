from datetime import date, datetime
from typing import Any, Self

from bootstrap_form.form.Element import Element
from bootstrap_form.form.Exceptions import InvalidArgumentError
from bootstrap_form.form.Select import Select


class MonthSelect(Element):
    """A month/year pair of selects sharing one name, e.g. ``birth[month]`` and ``birth[year]``."""

    parts = ("month", "year")

    def __init__(self, name: str | None = None, options: dict | None = None):
        self.month_element = Select("month")
        self.year_element = Select("year")
        current_year = date.today().year
        self.min_year = current_year - 100
        self.max_year = current_year
        self.create_empty_option = False
        self.render_delimiters = True
        super().__init__(name, options)

    def sub_elements(self) -> dict[str, Select]:
        return {part: getattr(self, f"{part}_element") for part in self.parts}

    def set_name(self, name: str) -> Self:
        super().set_name(name)
        for part, element in self.sub_elements().items():
            element.set_name(f"{name}[{part}]")
        return self

    def set_options(self, options: dict) -> Self:
        super().set_options(options)
        if "min_year" in options:
            self.set_min_year(options["min_year"])
        if "max_year" in options:
            self.set_max_year(options["max_year"])
        if "create_empty_option" in options:
            self.set_should_create_empty_option(options["create_empty_option"])
        if "render_delimiters" in options:
            self.set_should_render_delimiters(options["render_delimiters"])
        for part, element in self.sub_elements().items():
            if f"{part}_attributes" in options:
                element.set_attributes(options[f"{part}_attributes"])
        return self

    def get_month_element(self) -> Select:
        return self.month_element

    def get_year_element(self) -> Select:
        return self.year_element

    def set_min_year(self, min_year: int) -> Self:
        self.min_year = int(min_year)
        return self

    def get_min_year(self) -> int:
        return self.min_year

    def set_max_year(self, max_year: int) -> Self:
        self.max_year = int(max_year)
        return self

    def get_max_year(self) -> int:
        return self.max_year

    def set_should_create_empty_option(self, flag: bool) -> Self:
        self.create_empty_option = bool(flag)
        return self

    def should_create_empty_option(self) -> bool:
        return self.create_empty_option

    def set_should_render_delimiters(self, flag: bool) -> Self:
        self.render_delimiters = bool(flag)
        return self

    def should_render_delimiters(self) -> bool:
        return self.render_delimiters

    def set_value(self, value: Any) -> Self:
        parts = self._split_value(value)
        for part, element in self.sub_elements().items():
            element.set_value(parts.get(part))
        self.value = value
        return self

    def get_value(self) -> str | None:
        parts = {part: element.get_value() for part, element in self.sub_elements().items()}
        if None in parts.values():
            return None
        return self._join_value(parts)

    def _join_value(self, parts: dict) -> str:
        return f"{parts['year']}-{parts['month']}"

    def _split_value(self, value: Any) -> dict:
        match value:
            case None | "":
                return {}
            case datetime() | date():
                return self._split_date(value)
            case dict():
                return {key: self._pad(key, item) for key, item in value.items() if item not in (None, "")}
            case str():
                try:
                    return self._split_date(datetime.fromisoformat(value))
                except ValueError:
                    pass
                pieces = value.split("-")
                if len(pieces) == 2 and all(piece.isdigit() for piece in pieces):
                    return {"year": pieces[0], "month": pieces[1].zfill(2)}
        raise InvalidArgumentError(
            f"{type(self).__name__} expects a date, datetime, dict or ISO string value, got {value!r}"
        )

    def _split_date(self, value: date) -> dict:
        parts = {"year": str(value.year), "month": f"{value.month:02d}", "day": f"{value.day:02d}"}
        if isinstance(value, datetime):
            parts.update(hour=f"{value.hour:02d}", minute=f"{value.minute:02d}", second=f"{value.second:02d}")
        return parts

    @staticmethod
    def _pad(key: str, item: Any) -> str:
        if key == "year":
            return str(item)
        return str(item).zfill(2)

    def clone(self) -> Self:
        cloned = super().clone()
        for part, element in self.sub_elements().items():
            setattr(cloned, f"{part}_element", element.clone())
        return cloned


class DateSelect(MonthSelect):
    parts = ("day", "month", "year")

    def __init__(self, name: str | None = None, options: dict | None = None):
        self.day_element = Select("day")
        super().__init__(name, options)

    def get_day_element(self) -> Select:
        return self.day_element

    def _join_value(self, parts: dict) -> str:
        return f"{parts['year']}-{parts['month']}-{parts['day']}"


class DateTimeSelect(DateSelect):
    parts = ("day", "month", "year", "hour", "minute", "second")

    def __init__(self, name: str | None = None, options: dict | None = None):
        self.hour_element = Select("hour")
        self.minute_element = Select("minute")
        self.second_element = Select("second")
        self.show_seconds = False
        super().__init__(name, options)

    def set_options(self, options: dict) -> Self:
        super().set_options(options)
        if "should_show_seconds" in options:
            self.set_should_show_seconds(options["should_show_seconds"])
        return self

    def get_hour_element(self) -> Select:
        return self.hour_element

    def get_minute_element(self) -> Select:
        return self.minute_element

    def get_second_element(self) -> Select:
        return self.second_element

    def set_should_show_seconds(self, flag: bool) -> Self:
        self.show_seconds = bool(flag)
        return self

    def should_show_seconds(self) -> bool:
        return self.show_seconds

    def set_value(self, value: Any) -> Self:
        super().set_value(value)
        # a missing seconds part defaults to "00" so the value stays complete
        if self.second_element.get_value() is None and self.hour_element.get_value() is not None:
            self.second_element.set_value("00")
        return self

    def _join_value(self, parts: dict) -> str:
        return (
            f"{parts['year']}-{parts['month']}-{parts['day']} "
            f"{parts['hour']}:{parts['minute']}:{parts['second']}"
        )
