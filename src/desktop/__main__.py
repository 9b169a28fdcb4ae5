"""
Desktop app: Tkinter form + ContactService + JSON file store.
Run: python -m desktop (from repo root, with .env or env vars set).
"""

import logging
import tkinter as tk
from tkinter import ttk

from contatos import config
from contatos.application import ContactService
from contatos.infrastructure import JsonContactStore
from desktop import presenter
from desktop.form import ContactForm

logger = logging.getLogger(__name__)

APP_TITLE = "Lista de Contatos"


class ContactsWindow(tk.Tk):
    """Contact list on the left, name/phone form and buttons on the right."""

    def __init__(self, service: ContactService) -> None:
        super().__init__()
        self.title(APP_TITLE)
        self.resizable(False, False)

        self.form = ContactForm(service)

        self.name_var = tk.StringVar()
        self.phone_var = tk.StringVar()

        self._build_ui()
        self.phone_var.trace_add("write", self._on_phone_changed)
        self._render_list()

    # ---------- UI ----------
    def _build_ui(self) -> None:
        outer = ttk.Frame(self, padding=12)
        outer.pack(fill="both", expand=True)

        self.contact_list = tk.Listbox(outer, height=14, width=30, exportselection=False)
        self.contact_list.grid(row=0, column=0, rowspan=6, sticky="ns", padx=(0, 12))
        self.contact_list.bind("<<ListboxSelect>>", self._on_select)

        ttk.Label(outer, text="Nome:").grid(row=0, column=1, sticky="w")
        ttk.Entry(outer, textvariable=self.name_var, width=32).grid(row=1, column=1, sticky="ew")

        ttk.Label(outer, text="Telefone:").grid(row=2, column=1, sticky="w", pady=(8, 0))
        self.phone_entry = ttk.Entry(outer, textvariable=self.phone_var, width=32)
        self.phone_entry.grid(row=3, column=1, sticky="ew")

        buttons = ttk.Frame(outer)
        buttons.grid(row=4, column=1, sticky="w", pady=(12, 0))
        ttk.Button(buttons, text="Adicionar", command=self.on_add).pack(side="left")
        ttk.Button(buttons, text="Salvar Edição", command=self.on_save_edit).pack(side="left", padx=4)
        ttk.Button(buttons, text="Excluir", command=self.on_delete).pack(side="left")
        ttk.Button(buttons, text="Limpar", command=self.on_clear).pack(side="left", padx=(4, 0))

        self.status_label = ttk.Label(outer, text="")
        self.status_label.grid(row=5, column=1, sticky="w", pady=(12, 0))

    def _render_list(self) -> None:
        self.contact_list.delete(0, tk.END)
        for name in self.form.names():
            self.contact_list.insert(tk.END, name)
        if self.form.selected is not None:
            self.contact_list.selection_set(self.form.selected)

    def _read_fields(self) -> None:
        self.form.name = self.name_var.get()
        self.form.phone = self.phone_var.get()

    def _write_fields(self) -> None:
        self.name_var.set(self.form.name)
        self.phone_var.set(self.form.phone)

    def _apply(self, status: presenter.Status) -> None:
        """Push form state back into the widgets and show status."""
        self._write_fields()
        self._render_list()
        self.status_label.configure(text=status.text, foreground=status.color)

    # ---------- events ----------
    def _on_phone_changed(self, *_args) -> None:
        formatted = self.form.phone_typed(self.phone_var.get())
        # Writing back re-enters this callback; it stops once the text is stable.
        if formatted is not None:
            self.phone_var.set(formatted)
            self.phone_entry.icursor(tk.END)

    def _on_select(self, _event=None) -> None:
        selection = self.contact_list.curselection()
        self.form.select(selection[0] if selection else None)
        if self.form.selected is not None:
            self._write_fields()

    def on_add(self) -> None:
        self._read_fields()
        self._apply(self.form.add())

    def on_save_edit(self) -> None:
        self._read_fields()
        self._apply(self.form.save_edit())

    def on_delete(self) -> None:
        self._read_fields()
        self._apply(self.form.delete())

    def on_clear(self) -> None:
        self._apply(self.form.clear())
        self.contact_list.selection_clear(0, tk.END)


def main() -> None:
    config.load_env()
    config.configure_logging()
    store = JsonContactStore(config.store_path())
    logger.info("Contact store: %s", store.path)
    service = ContactService(store)
    service.load()
    ContactsWindow(service).mainloop()


if __name__ == "__main__":
    main()
