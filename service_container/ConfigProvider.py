from bootstrap_form.form.Exceptions import ServiceNotFoundError
from bootstrap_form.service_container.HelperPluginManager import HelperPluginManager, canonical_name
from bootstrap_form.view.Form import Form
from bootstrap_form.view.FormButton import FormButton
from bootstrap_form.view.FormCheckbox import FormCheckbox
from bootstrap_form.view.FormCollection import FormCollection
from bootstrap_form.view.FormDateSelect import FormDateSelect, FormDateTimeSelect, FormMonthSelect
from bootstrap_form.view.FormElement import FormElement
from bootstrap_form.view.FormElementErrors import FormElementErrors
from bootstrap_form.view.FormHtml import FormHtml
from bootstrap_form.view.FormInput import (
    FormColor, FormDate, FormDateTime, FormDateTimeLocal, FormEmail, FormFile, FormHidden, FormImage, FormInput,
    FormMonth, FormNumber, FormPassword, FormRange, FormReset, FormSearch, FormSubmit, FormTel, FormText, FormTime,
    FormUrl, FormWeek,
)
from bootstrap_form.view.FormLabel import FormLabel
from bootstrap_form.view.FormMultiCheckbox import FormMultiCheckbox, FormRadio
from bootstrap_form.view.FormRow import FormRow
from bootstrap_form.view.FormSelect import FormSelect
from bootstrap_form.view.FormTextarea import FormTextarea

HELPERS = {
    "form": Form,
    "form_button": FormButton,
    "form_checkbox": FormCheckbox,
    "form_collection": FormCollection,
    "form_color": FormColor,
    "form_date": FormDate,
    "form_date_select": FormDateSelect,
    "form_date_time": FormDateTime,
    "form_date_time_local": FormDateTimeLocal,
    "form_date_time_select": FormDateTimeSelect,
    "form_element": FormElement,
    "form_element_errors": FormElementErrors,
    "form_email": FormEmail,
    "form_file": FormFile,
    "form_hidden": FormHidden,
    "form_html": FormHtml,
    "form_image": FormImage,
    "form_input": FormInput,
    "form_label": FormLabel,
    "form_month": FormMonth,
    "form_month_select": FormMonthSelect,
    "form_multi_checkbox": FormMultiCheckbox,
    "form_number": FormNumber,
    "form_password": FormPassword,
    "form_radio": FormRadio,
    "form_range": FormRange,
    "form_reset": FormReset,
    "form_row": FormRow,
    "form_search": FormSearch,
    "form_select": FormSelect,
    "form_submit": FormSubmit,
    "form_tel": FormTel,
    "form_text": FormText,
    "form_textarea": FormTextarea,
    "form_time": FormTime,
    "form_url": FormUrl,
    "form_week": FormWeek,
}

_CANONICAL = {canonical_name(name): factory for name, factory in HELPERS.items()}


def get_helper_config() -> dict:
    return dict(HELPERS)


def create_helper(name: str):
    """A new, unshared helper for ``name``; used when a helper has no view to ask."""
    factory = _CANONICAL.get(canonical_name(name))
    if factory is None:
        raise ServiceNotFoundError(f"A plugin by the name {name!r} was not found in the plugin manager")
    return factory()


def create_plugin_manager(view=None, translator=None, text_domain=None) -> HelperPluginManager:
    return HelperPluginManager(HELPERS, view=view, translator=translator, text_domain=text_domain)
