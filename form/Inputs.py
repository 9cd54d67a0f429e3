from bootstrap_form.form.Element import Element


class Text(Element):
    default_attributes = {"type": "text"}


class Tel(Element):
    default_attributes = {"type": "tel"}


class Email(Element):
    default_attributes = {"type": "email"}


class Password(Element):
    default_attributes = {"type": "password"}


class Number(Element):
    default_attributes = {"type": "number"}


class Range(Element):
    default_attributes = {"type": "range"}


class Url(Element):
    default_attributes = {"type": "url"}


class Search(Element):
    default_attributes = {"type": "search"}


class Date(Element):
    default_attributes = {"type": "date"}


class DateTime(Element):
    default_attributes = {"type": "datetime"}


class DateTimeLocal(Element):
    default_attributes = {"type": "datetime-local"}


class Month(Element):
    default_attributes = {"type": "month"}


class Week(Element):
    default_attributes = {"type": "week"}


class Time(Element):
    default_attributes = {"type": "time"}


class Color(Element):
    default_attributes = {"type": "color"}


class Hidden(Element):
    default_attributes = {"type": "hidden"}


class File(Element):
    default_attributes = {"type": "file"}


class Image(Element):
    default_attributes = {"type": "image"}


class Submit(Element):
    default_attributes = {"type": "submit"}


class Reset(Element):
    default_attributes = {"type": "reset"}


class Textarea(Element):
    default_attributes = {"type": "textarea"}


class Button(Element):
    default_attributes = {"type": "button"}
