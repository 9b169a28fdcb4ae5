"""Status line text and colour for each outcome of the contact form."""

from dataclasses import dataclass

from contatos.application import (
    INVALID_NAME,
    INVALID_PHONE,
    ContactDeleted,
    ContactSaved,
    Invalid,
    NotFound,
)

SUCCESS_COLOR = "green"
ERROR_COLOR = "red"


@dataclass(frozen=True)
class Status:
    text: str
    color: str = SUCCESS_COLOR


CLEARED = Status("")
MISSING_FIELDS = Status("Preencha todos os campos.", ERROR_COLOR)
INVALID_PHONE_STATUS = Status("Telefone inválido! Use (XX) XXXXX-XXXX", ERROR_COLOR)
INVALID_NAME_STATUS = Status("Nome inválido.", ERROR_COLOR)
NO_SELECTION = Status("Selecione um contato.", ERROR_COLOR)
ADDED = Status("Contato salvo!")
EDITED = Status("Editado com sucesso!")
DELETED = Status("Contato excluído.")


def _invalid_status(result: Invalid) -> Status:
    if result.reason == INVALID_PHONE:
        return INVALID_PHONE_STATUS
    if result.reason == INVALID_NAME:
        return INVALID_NAME_STATUS
    return MISSING_FIELDS


def status_for_add(result: ContactSaved | Invalid) -> Status:
    if isinstance(result, Invalid):
        return _invalid_status(result)
    return ADDED


def status_for_edit(result: ContactSaved | Invalid | NotFound) -> Status:
    if isinstance(result, NotFound):
        return NO_SELECTION
    if isinstance(result, Invalid):
        return _invalid_status(result)
    return EDITED


def status_for_delete(result: ContactDeleted | NotFound) -> Status:
    if isinstance(result, NotFound):
        return NO_SELECTION
    return DELETED
