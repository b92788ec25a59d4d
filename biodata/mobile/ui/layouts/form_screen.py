from __future__ import annotations

from typing import TYPE_CHECKING, Dict

import flet as ft

from biodata.shared.domain.form import FormField
from biodata.mobile.ui.theme import (
    PRIMARY, TEXT_STRONG, TEXT_MUTED, get_log_color,
    SPACE_FIELD, SPACE_BUTTON, SPACE_RESULT,
    LABEL_FIRST_NAME, LABEL_LAST_NAME, LABEL_EMAIL, LABEL_SUBMIT, FULL_NAME_PREFIX,
)

if TYPE_CHECKING:
    from biodata.mobile.controllers.form_controller import FormScreenController


FIELD_LABELS: Dict[FormField, str] = {
    FormField.FIRST_NAME: LABEL_FIRST_NAME,
    FormField.LAST_NAME: LABEL_LAST_NAME,
    FormField.EMAIL: LABEL_EMAIL,
}


def apply_form_theme(page: ft.Page, seed_color: str = PRIMARY, theme_mode: str = "light") -> None:
    """Material 3 baseline for the form screen."""
    page.theme = ft.Theme(color_scheme_seed=seed_color, use_material3=True)
    page.theme_mode = {
        "dark": ft.ThemeMode.DARK,
        "system": ft.ThemeMode.SYSTEM,
    }.get(theme_mode, ft.ThemeMode.LIGHT)


def _build_input(field: FormField, controller: FormScreenController) -> ft.TextField:
    def _on_change(e: ft.ControlEvent) -> None:
        controller.on_field_change(field, e.control.value or "")

    return ft.TextField(
        label=FIELD_LABELS[field],
        value=controller.form_state.current.value_of(field),
        border=ft.OutlineInputBorder(),
        keyboard_type=ft.KeyboardType.EMAIL if field is FormField.EMAIL else ft.KeyboardType.NAME,
        on_change=_on_change,
    )


def build_form_view(page: ft.Page, controller: FormScreenController, padding: int = 24) -> ft.Control:
    form_state = controller.form_state

    inputs = {field: _build_input(field, controller) for field in FormField}

    full_name_text = ft.Text("", size=16, weight=ft.FontWeight.W_500, color=TEXT_STRONG, visible=False)
    status_text = ft.Text(form_state.status_text.value, size=12, color=TEXT_MUTED)

    async def _on_submit(e: ft.ControlEvent) -> None:
        await controller.on_submit()

    submit_button = ft.FilledButton(LABEL_SUBMIT, on_click=_on_submit)

    def _safe_update() -> None:
        try:
            page.update()
        except RuntimeError:
            # Session destroyed, ignore update
            pass

    def _sync_form() -> None:
        state = form_state.current
        for field, text_field in inputs.items():
            value = state.value_of(field)
            # Writing back an identical value would move the cursor while typing
            if text_field.value != value:
                text_field.value = value
            text_field.error_text = state.error_of(field)

        full_name_text.visible = state.has_full_name
        full_name_text.value = f"{FULL_NAME_PREFIX}{state.full_name}" if state.has_full_name else ""
        _safe_update()

    def _sync_status() -> None:
        status_text.value = form_state.status_text.value
        logs = form_state.logs.value
        status_text.color = get_log_color(logs[-1].get("level", "info")) if logs else TEXT_MUTED
        _safe_update()

    # --- Listener Bindings ---
    form_state.subscribe(_sync_form)
    form_state.status_text.listen(_sync_status)

    column = ft.Column(
        [
            inputs[FormField.FIRST_NAME],
            ft.Container(height=SPACE_FIELD),
            inputs[FormField.LAST_NAME],
            ft.Container(height=SPACE_FIELD),
            inputs[FormField.EMAIL],
            ft.Container(height=SPACE_BUTTON),
            submit_button,
            ft.Container(height=SPACE_RESULT),
            full_name_text,
            status_text,
        ],
        spacing=0,
        alignment=ft.MainAxisAlignment.CENTER,
        horizontal_alignment=ft.CrossAxisAlignment.STRETCH,
        expand=True,
    )

    # Initial Sync (no page.update yet, the caller adds the view first)
    state = form_state.current
    for field, text_field in inputs.items():
        text_field.error_text = state.error_of(field)
    full_name_text.visible = state.has_full_name
    full_name_text.value = f"{FULL_NAME_PREFIX}{state.full_name}" if state.has_full_name else ""

    return ft.Container(content=column, padding=padding, expand=True)
