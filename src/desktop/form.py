"""State of the contact form, kept apart from Tk so it can be driven directly."""

from contatos.application import ContactSaved, ContactService
from desktop import presenter


class ContactForm:
    """Name and phone fields plus the selected row of the contact list.
    The selection is an index into the service's list, never a Contact.
    """

    def __init__(self, service: ContactService) -> None:
        self._service = service
        self.name = ""
        self.phone = ""
        self.selected: int | None = None

    def names(self) -> list[str]:
        return [s.full_name for s in self._service.list_contacts()]

    def phone_typed(self, text: str) -> str | None:
        """Formatted phone text to write back, or None when text is already stable."""
        if not text:
            return None
        formatted = self._service.format_phone_input(text)
        return formatted if formatted != text else None

    def select(self, index: int | None) -> None:
        summary = self._service.get_contact(index) if index is not None else None
        if summary is None:
            self.selected = None
            return
        self.selected = index
        self.name = summary.full_name
        self.phone = self._service.format_phone_input(summary.phone_number)

    def add(self) -> presenter.Status:
        result = self._service.add_contact(self.name, self.phone)
        if isinstance(result, ContactSaved):
            self.clear()
        return presenter.status_for_add(result)

    def save_edit(self) -> presenter.Status:
        if self.selected is None:
            return presenter.NO_SELECTION
        result = self._service.update_contact(self.selected, self.name, self.phone)
        if isinstance(result, ContactSaved):
            self.phone = result.phone_number
        return presenter.status_for_edit(result)

    def delete(self) -> presenter.Status:
        if self.selected is None:
            return presenter.NO_SELECTION
        result = self._service.delete_contact(self.selected)
        self.clear()
        return presenter.status_for_delete(result)

    def clear(self) -> presenter.Status:
        self.name = ""
        self.phone = ""
        self.selected = None
        return presenter.CLEARED
