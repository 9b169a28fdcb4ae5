"""Tests for the desktop status line mapping (no Tk needed)."""

from contatos.application import (
    INVALID_NAME,
    INVALID_PHONE,
    MISSING_FIELDS,
    ContactDeleted,
    ContactSaved,
    Invalid,
    NotFound,
)
from desktop import presenter


def _saved() -> ContactSaved:
    return ContactSaved(index=0, full_name="Ana", phone_number="(11) 98765-4321")


def test_add_statuses() -> None:
    assert presenter.status_for_add(_saved()) == presenter.Status("Contato salvo!", "green")
    missing = presenter.status_for_add(Invalid(reason=MISSING_FIELDS))
    assert missing.text == "Preencha todos os campos."
    assert missing.color == "red"
    bad_phone = presenter.status_for_add(Invalid(reason=INVALID_PHONE))
    assert bad_phone.text == "Telefone inválido! Use (XX) XXXXX-XXXX"
    assert bad_phone.color == "red"


def test_edit_statuses() -> None:
    assert presenter.status_for_edit(_saved()) == presenter.EDITED
    assert presenter.status_for_edit(NotFound(index=3)) == presenter.NO_SELECTION
    assert presenter.status_for_edit(Invalid(reason=INVALID_PHONE)) == presenter.INVALID_PHONE_STATUS


def test_delete_statuses() -> None:
    assert presenter.status_for_delete(ContactDeleted(index=0, full_name="Ana")).text == "Contato excluído."
    assert presenter.status_for_delete(NotFound(index=0)).color == "red"


def test_cleared_status_is_empty() -> None:
    assert presenter.CLEARED.text == ""


def test_invalid_name_status() -> None:
    status = presenter.status_for_add(Invalid(reason=INVALID_NAME))
    assert status == presenter.INVALID_NAME_STATUS
    assert status.color == "red"
