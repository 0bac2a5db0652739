"""Ledger view: dispatch form, record table and CSV export."""

from __future__ import annotations

from typing import TYPE_CHECKING

import flet as ft

from ...errors import DeleteError, LoadError
from ...logging_config import get_logger
from ...models.bilty import DATE_FIELDS, FIELD_NAMES, NUMERIC_FIELDS
from ...services import export_csv
from ...services.form import SERIAL_FIELD
from ...services.table import BiltyRow, project_table
from ..components import (
    build_app_bar,
    build_card,
    empty_state,
    show_confirm_dialog,
    show_error_dialog,
    show_toast,
)
from ..navigation import LEDGER_ROUTE, LOGIN_ROUTE
from .auth import LOAD_FAILED

if TYPE_CHECKING:
    from ..context import AppContext

logger = get_logger(__name__)

FIELD_LABELS = {
    "bilty_sl_no": "Bilty Sl. No.",
    "lr_no": "LR No.",
    "bill_no": "Bill No.",
    "bill_date": "Bill Date",
    "truck_no": "Truck No.",
    "destination": "Destination",
    "weight": "Weight (MT)",
    "freight": "Freight (₹)",
    "diesel": "Diesel (L)",
    "total_adv": "Total Advance (₹)",
    "balance": "Balance (₹)",
    "pump_name": "Pump Name",
    "payment_officer": "Payment Officer",
    "damage_if_any": "Damage If Any",
    "margin": "Margin (₹)",
}
NO_DATA_MESSAGE = "No records found. Add your first dispatch above."
DELETE_PROMPT = "Are you sure you want to permanently delete this record?"


def _stacked(primary: str, secondary: str) -> ft.Column:
    return ft.Column(
        controls=[
            ft.Text(primary),
            ft.Text(secondary, size=11, color=ft.Colors.ON_SURFACE_VARIANT),
        ],
        spacing=0,
        tight=True,
    )


def build_ledger_view(ctx: AppContext, page: ft.Page) -> ft.View:
    """Build the form, table and toolbar for the signed-in user."""

    ctx.page = page
    form = ctx.form

    fields: dict[str, ft.TextField] = {}
    for name in FIELD_NAMES:
        field = ft.TextField(
            label=FIELD_LABELS[name],
            dense=True,
            col={"sm": 12, "md": 4, "lg": 3},
        )
        if name in NUMERIC_FIELDS:
            field.keyboard_type = ft.KeyboardType.NUMBER
        if name in DATE_FIELDS:
            field.hint_text = "YYYY-MM-DD"
            field.keyboard_type = ft.KeyboardType.DATETIME
        field.on_change = lambda e, key=name: form.set_value(key, e.control.value)
        fields[name] = field

    form_title = ft.Text("", size=18, weight=ft.FontWeight.BOLD)
    form_error = ft.Text("", color=ft.Colors.ERROR, visible=False)
    save_button = ft.FilledButton("", icon=ft.Icons.SAVE)
    cancel_button = ft.TextButton("Cancel edit", visible=False)

    table_ref = ft.Ref[ft.DataTable]()
    no_data_ref = ft.Ref[ft.Container]()
    loading = ft.ProgressRing(width=24, height=24, visible=False)

    def sync_form() -> None:
        """Push the form controller's state into the input controls."""

        for name, field in fields.items():
            field.value = form.values.get(name, "")
        fields[SERIAL_FIELD].disabled = form.serial_locked
        form_title.value = form.title
        save_button.text = form.submit_label
        save_button.disabled = form.submitting
        cancel_button.visible = form.can_cancel
        form_error.value = form.error or ""
        form_error.visible = bool(form.error)

    def _row_controls(row: BiltyRow) -> ft.DataRow:
        return ft.DataRow(
            cells=[
                ft.DataCell(ft.Text(row.bilty_sl_no, weight=ft.FontWeight.BOLD)),
                ft.DataCell(_stacked(row.lr_no, row.bill_no)),
                ft.DataCell(ft.Text(row.bill_date)),
                ft.DataCell(_stacked(row.truck_no, row.destination)),
                ft.DataCell(ft.Text(row.weight)),
                ft.DataCell(ft.Text(row.freight)),
                ft.DataCell(_stacked(row.advance, row.balance)),
                ft.DataCell(_stacked(row.diesel, row.pump_name)),
                ft.DataCell(ft.Text(row.margin)),
                ft.DataCell(
                    ft.Row(
                        controls=[
                            ft.IconButton(
                                icon=ft.Icons.EDIT,
                                tooltip="Edit",
                                data=row.record_id,
                                on_click=lambda _, rid=row.record_id: start_edit(rid),
                            ),
                            ft.IconButton(
                                icon=ft.Icons.DELETE_OUTLINE,
                                icon_color=ft.Colors.RED,
                                tooltip="Delete",
                                data=row.record_id,
                                on_click=lambda _, rid=row.record_id: confirm_delete(rid),
                            ),
                        ],
                        spacing=0,
                    )
                ),
            ]
        )

    def render_table() -> None:
        projection = project_table(ctx.store.records, ctx.config.DATE_FORMAT)
        table = table_ref.current
        if table is not None:
            table.rows = [_row_controls(row) for row in projection.rows]
            table.visible = not projection.is_empty
        if no_data_ref.current is not None:
            no_data_ref.current.visible = projection.is_empty

    def refresh(_=None) -> None:
        loading.visible = True
        no_data_ref.current.visible = False
        page.update()
        try:
            ctx.store.list()
        except LoadError as exc:
            logger.error(f"Reload failed: {exc.message}")
            show_toast(page, LOAD_FAILED, is_error=True)
        finally:
            loading.visible = False
            render_table()
            page.update()

    def submit(_e) -> None:
        for name, field in fields.items():
            form.set_value(name, field.value)
        was_editing = form.can_cancel
        save_button.disabled = True
        form_error.visible = False
        page.update()

        saved = form.submit(ctx.store)
        sync_form()
        if saved is not None:
            render_table()
            show_toast(page, "Record updated!" if was_editing else "Record saved!")
        page.update()

    def start_edit(record_id) -> None:
        record = ctx.store.find(record_id)
        if record is None:
            return
        form.begin_edit(record)
        sync_form()
        page.update()

    def cancel_edit(_e) -> None:
        if form.cancel():
            sync_form()
            page.update()

    def confirm_delete(record_id) -> None:
        if record_id is None:
            return

        def _delete() -> None:
            try:
                ctx.store.delete(record_id)
            except DeleteError as exc:
                logger.error(f"Delete failed: {exc.message}", extra={"record_id": record_id})
                show_toast(page, "Error deleting record.", is_error=True)
                return
            if form.editing_id == record_id:
                form.begin_create()
                sync_form()
            render_table()
            show_toast(page, "Record deleted successfully.")

        show_confirm_dialog(page, "Delete record", DELETE_PROMPT, _delete)

    def export(_e) -> None:
        try:
            path = export_csv.export_bilty_csv(
                records=ctx.store.records,
                output_dir=ctx.config.export_dir,
                filename=ctx.config.EXPORT_FILENAME,
                date_format=ctx.config.DATE_FORMAT,
            )
        except OSError as exc:
            logger.error(f"Export failed: {exc}", exc_info=True)
            show_error_dialog(page, "Export failed", str(exc))
            return
        if path is None:
            show_toast(page, "No data to export.", is_error=True)
            return
        show_toast(page, f"Data exported successfully! Saved to {path}")

    def logout(_e) -> None:
        ctx.session.logout()
        form.begin_create()
        page.go(LOGIN_ROUTE)
        show_toast(page, "Logged out successfully.")

    save_button.on_click = submit
    cancel_button.on_click = cancel_edit

    form_card = build_card(
        form_title,
        ft.Column(
            controls=[
                ft.ResponsiveRow(controls=list(fields.values()), spacing=10, run_spacing=10),
                form_error,
                ft.Row(controls=[save_button, cancel_button], spacing=8),
            ],
            spacing=12,
        ),
    )

    table = ft.DataTable(
        ref=table_ref,
        columns=[
            ft.DataColumn(ft.Text("Sl. No.")),
            ft.DataColumn(ft.Text("LR / Bill")),
            ft.DataColumn(ft.Text("Bill Date")),
            ft.DataColumn(ft.Text("Truck / Destination")),
            ft.DataColumn(ft.Text("Weight")),
            ft.DataColumn(ft.Text("Freight")),
            ft.DataColumn(ft.Text("Advance / Balance")),
            ft.DataColumn(ft.Text("Diesel / Pump")),
            ft.DataColumn(ft.Text("Margin")),
            ft.DataColumn(ft.Text("Actions")),
        ],
        rows=[],
        heading_row_height=36,
    )

    table_card = build_card(
        ft.Row(
            controls=[
                ft.Row(
                    controls=[ft.Text("Dispatch ledger", size=18, weight=ft.FontWeight.BOLD), loading],
                    spacing=12,
                ),
                ft.OutlinedButton("Export CSV", icon=ft.Icons.DOWNLOAD, on_click=export),
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
        ),
        ft.Column(
            controls=[
                ft.Row(controls=[table], scroll=ft.ScrollMode.AUTO),
                empty_state(NO_DATA_MESSAGE, ref=no_data_ref),
            ],
        ),
    )

    sync_form()
    render_table()

    app_bar = build_app_bar(ctx, ctx.config.APP_NAME, on_logout=logout, on_refresh=refresh)
    return ft.View(
        route=LEDGER_ROUTE,
        appbar=app_bar,
        controls=[
            ft.Column(
                controls=[form_card, table_card],
                spacing=16,
                expand=True,
                scroll=ft.ScrollMode.AUTO,
            )
        ],
        padding=20,
    )
