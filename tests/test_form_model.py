from datetime import date
from unittest import TestCase

from bootstrap_form.form.Checkbox import Checkbox, MultiCheckbox
from bootstrap_form.form.Collection import Collection
from bootstrap_form.form.DateSelect import DateSelect, DateTimeSelect, MonthSelect
from bootstrap_form.form.Exceptions import DomainError, InvalidArgumentError
from bootstrap_form.form.Factory import Factory
from bootstrap_form.form.Fieldset import Fieldset
from bootstrap_form.form.Form import Form
from bootstrap_form.form.InputFilter import IS_EMPTY_MESSAGE, Input, InputFilter
from bootstrap_form.form.Inputs import Email, Tel, Text
from bootstrap_form.form.Select import Select
from bootstrap_form.form.Validation import max_length, pattern, rule_from_spec
from bootstrap_form.utilities.ValueOptions import iter_value_options, selected_values


class TestElement(TestCase):
    def test_type_comes_before_name(self):
        element = Text("email")
        element.set_attribute("id", "email")
        assert list(element.get_attributes()) == ["type", "name", "id"]

    def test_value_attribute_goes_to_value(self):
        element = Text("email").set_attribute("value", "a@b.c")
        assert element.get_value() == "a@b.c"
        assert not element.has_attribute("value")

    def test_label_options_are_split_out(self):
        element = Text("name", {
            "label": "Name",
            "label_attributes": {"class": "big"},
            "label_options": {"always_wrap": True},
            "layout": "horizontal",
        })
        assert element.get_label() == "Name"
        assert element.get_label_attributes() == {"class": "big"}
        assert element.get_label_option("always_wrap") is True
        assert element.get_option("layout") == "horizontal"

    def test_clone_does_not_share_attributes(self):
        element = Text("name").set_attribute("class", "a")
        cloned = element.clone().set_attribute("class", "b")
        assert element.get_attribute("class") == "a"
        assert cloned.get_attribute("class") == "b"


class TestCheckbox(TestCase):
    def test_value_follows_checked_state(self):
        checkbox = Checkbox("agree")
        assert checkbox.get_value() == "0"
        checkbox.set_value("1")
        assert checkbox.is_checked()
        assert checkbox.get_value() == "1"
        checkbox.set_value(False)
        assert checkbox.get_value() == "0"

    def test_custom_values(self):
        checkbox = Checkbox("agree", {"checked_value": "yes", "unchecked_value": "no", "use_hidden_element": False})
        checkbox.set_value("yes")
        assert checkbox.get_value() == "yes"
        assert not checkbox.use_hidden()

    def test_multi_checkbox_defaults(self):
        element = MultiCheckbox("colors", {"value_options": {"r": "Red"}})
        assert not element.use_hidden()
        assert element.get_unchecked_value() == ""
        element.set_value(["r"])
        assert element.get_value() == ["r"]


class TestDateSelects(TestCase):
    def test_month_select_names_its_parts(self):
        element = MonthSelect("birth")
        assert element.get_month_element().get_name() == "birth[month]"
        assert element.get_year_element().get_name() == "birth[year]"
        assert element.get_max_year() == date.today().year
        assert element.get_min_year() == date.today().year - 100

    def test_month_select_value(self):
        element = MonthSelect("birth").set_value("2023-5")
        assert element.get_month_element().get_value() == "05"
        assert element.get_value() == "2023-05"

    def test_date_select_accepts_date_and_dict(self):
        element = DateSelect("day").set_value(date(2023, 5, 6))
        assert element.get_value() == "2023-05-06"
        element.set_value({"year": 2024, "month": 1, "day": 9})
        assert element.get_value() == "2024-01-09"

    def test_incomplete_value_is_none(self):
        assert DateSelect("day").get_value() is None

    def test_date_time_select_defaults_seconds(self):
        element = DateTimeSelect("at").set_value({"year": 2023, "month": 5, "day": 6, "hour": 7, "minute": 8})
        assert element.get_value() == "2023-05-06 07:08:00"

    def test_invalid_value_raises(self):
        with self.assertRaises(InvalidArgumentError):
            DateSelect("day").set_value("yesterday")


class TestFieldset(TestCase):
    def test_add_from_spec_and_lookup(self):
        fieldset = Fieldset("address")
        fieldset.add({"type": "text", "name": "street"})
        fieldset.add(Fieldset("geo"))
        assert isinstance(fieldset.get("street"), Text)
        assert list(fieldset.get_elements()) == ["street"]
        assert list(fieldset.get_fieldsets()) == ["geo"]

    def test_add_requires_a_name(self):
        with self.assertRaises(InvalidArgumentError):
            Fieldset("address").add(Text())

    def test_unknown_child_raises(self):
        with self.assertRaises(InvalidArgumentError):
            Fieldset("address").get("zip")

    def test_populate_and_messages(self):
        fieldset = Fieldset("person").add(Text("name")).add(Fieldset("address").add(Text("city")))
        fieldset.populate_values({"name": "Ann", "address": {"city": "Oslo"}, "unknown": 1})
        assert fieldset.get("name").get_value() == "Ann"
        assert fieldset.get("address").get("city").get_value() == "Oslo"

        fieldset.set_messages({"name": {"isEmpty": "Required"}})
        assert fieldset.get_messages() == {"name": {"isEmpty": "Required"}}
        assert fieldset.get_messages("name") == {"isEmpty": "Required"}


class TestCollection(TestCase):
    def make_form(self, **options):
        collection = Collection("phones", {
            "target_element": {"type": "tel", "name": "phone"},
            "count": 2,
            **options,
        })
        return Form("contact").add(collection), collection

    def test_prepare_creates_numbered_children(self):
        form, collection = self.make_form()
        form.prepare()
        assert [element.get_name() for element in collection] == ["phones[0]", "phones[1]"]
        assert all(isinstance(element, Tel) for element in collection)

    def test_template_is_prepared_but_not_a_child(self):
        form, collection = self.make_form(should_create_template=True)
        form.prepare()
        assert len(collection) == 2
        assert collection.get_template_element().get_name() == "phones[__index__]"

    def test_populate_values_adds_and_removes_children(self):
        _, collection = self.make_form()
        collection.prepare_element(None)
        collection.populate_values(["a", "b", "c"])
        assert [element.get_value() for element in collection] == ["a", "b", "c"]
        collection.populate_values(["x"])
        assert len(collection) == 1

    def test_count_is_never_negative(self):
        assert Collection("c", {"count": -3}).get_count() == 0


class TestForm(TestCase):
    def make_form(self):
        form = Form("signup")
        form.add(Email("email")).add(Text("nick"))
        form.set_input_filter({
            "email": {"required": True, "validators": [{"name": "min_length", "options": {"length": 5}}]},
            "nick": {"required": False},
        })
        return form

    def test_is_valid_without_data_raises(self):
        with self.assertRaises(DomainError):
            self.make_form().is_valid()

    def test_get_data_before_validation_raises(self):
        form = self.make_form().set_data({"email": "a@b.c"})
        with self.assertRaises(DomainError):
            form.get_data()

    def test_messages_reach_elements(self):
        form = self.make_form().set_data({"email": "ab"})
        assert not form.is_valid()
        assert form.get("email").get_messages() == {
            "stringLengthTooShort": "The input is less than 5 characters long",
        }
        assert form.get("nick").get_messages() == []

    def test_valid_data(self):
        form = self.make_form().set_data({"email": "ann@example.com"})
        assert form.is_valid()
        assert form.get_data() == {"email": "ann@example.com"}
        assert form.get("email").get_value() == "ann@example.com"

    def test_wrap_elements_prefixes_names(self):
        form = Form("contact", {"wrap_elements": True}).add(Text("name"))
        form.prepare().prepare()
        assert form.get("name").get_name() == "contact[name]"


class TestInputFilter(TestCase):
    def test_required_input(self):
        required = Input("email")
        assert not required.is_valid("")
        assert required.get_messages() == {"isEmpty": IS_EMPTY_MESSAGE}
        assert Input("email", required=False).is_valid(None)

    def test_nested_filter_from_spec(self):
        input_filter = InputFilter.from_spec({
            "address": {"type": "input_filter", "city": {"required": True}},
        })
        assert isinstance(input_filter.get("address"), InputFilter)
        input_filter.set_data({"address": {"city": ""}})
        assert not input_filter.is_valid()
        assert input_filter.get_messages() == {"address": {"city": {"isEmpty": IS_EMPTY_MESSAGE}}}

    def test_invalid_spec_raises(self):
        with self.assertRaises(InvalidArgumentError):
            InputFilter.from_spec({"email": "required"})


class TestValidation(TestCase):
    def test_rules(self):
        assert max_length(3).validate("abcd") == "The input is more than 3 characters long"
        assert max_length(3).validate("abc") is None
        assert pattern(r"^\d+$").validate("12") is None
        assert pattern(r"^\d+$", "Digits only").validate("a1") == "Digits only"

    def test_rule_from_spec(self):
        rule = rule_from_spec({"name": "pattern", "options": {"regex": "^a"}})
        assert rule.name == "regexNotMatch"
        with self.assertRaises(InvalidArgumentError):
            rule_from_spec({"name": "luhn"})


class TestFactory(TestCase):
    def test_create_form(self):
        form = Factory().create_form({
            "name": "contact",
            "attributes": {"action": "/send"},
            "elements": [
                {"spec": {"type": "email", "name": "email", "options": {"label": "Email"}}},
                {"spec": {"type": "text", "name": "first"}, "flags": {"name": "name"}},
            ],
            "fieldsets": [{"type": "fieldset", "name": "address", "elements": [{"type": "text", "name": "city"}]}],
            "input_filter": {"email": {"required": True}},
        })
        assert form.get_attribute("action") == "/send"
        assert form.get("email").get_label() == "Email"
        assert form.has("name")
        assert isinstance(form.get("address").get("city"), Text)
        assert form.get_input_filter().get("email").is_required()

    def test_select_from_spec(self):
        select = Factory().create({
            "type": "select",
            "name": "color",
            "options": {"value_options": {"r": "Red"}, "empty_option": "Choose"},
        })
        assert isinstance(select, Select)
        assert select.get_empty_option() == "Choose"

    def test_unknown_type_raises(self):
        with self.assertRaises(InvalidArgumentError):
            Factory().create({"type": "signature", "name": "x"})

    def test_create_form_requires_form_type(self):
        with self.assertRaises(InvalidArgumentError):
            Factory().create_form({"type": "text", "name": "x"})

    def test_custom_types(self):
        factory = Factory({"Phone": Tel})
        assert isinstance(factory.create({"type": "phone", "name": "p"}), Tel)


class TestValueOptions(TestCase):
    def test_shapes(self):
        assert list(iter_value_options({"1": "One"})) == [("1", {"value": "1", "label": "One"})]
        assert list(iter_value_options(["One"])) == [(0, {"value": "One", "label": "One"})]
        assert list(iter_value_options([("1", "One")])) == [(0, {"value": "1", "label": "One"})]
        group = list(iter_value_options({"g": {"options": {"1": "One"}}}))
        assert group == [("g", {"options": {"1": "One"}, "label": "g"})]

    def test_selected_values_are_strings(self):
        assert selected_values(None) == set()
        assert selected_values(1) == {"1"}
        assert selected_values([1, "2"]) == {"1", "2"}
