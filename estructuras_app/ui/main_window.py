"""Ventana principal de la aplicación."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QComboBox,
    QFileDialog,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from estructuras_app.core.containers import ContainerKind
from estructuras_app.core.errors import StoreError, ValidationError
from estructuras_app.core.services import UserService
from estructuras_app.models.user import UserDraft


class MainWindow(QMainWindow):
    """Formulario de alta y demostración de estructuras de datos."""

    def __init__(self, *, user_service: UserService, init_error: str | None = None) -> None:
        super().__init__()
        self.user_service = user_service

        self.setWindowTitle("Data Structures Demo with SQLite")
        self.resize(900, 640)

        self.txt_first_name = QLineEdit()
        self.txt_last_name = QLineEdit()
        self.txt_email = QLineEdit()
        self.txt_age = QLineEdit()
        self.btn_add_user = QPushButton("Add User")

        self.cbo_structures = QComboBox()
        self.btn_load_data = QPushButton("Load and Display Data")
        self.btn_export = QPushButton("Export...")

        self.txt_output = QPlainTextEdit()
        self.txt_output.setReadOnly(True)
        self.txt_output.setFont(QFont("Consolas", 9))

        self._build_ui()
        self._populate_structures()
        self._connect_signals()
        self._apply_styles()

        if init_error:
            QMessageBox.critical(
                self, "Error", f"Error initializing database: {init_error}"
            )

    # ------------------------------------------------------------------ UI
    def _build_ui(self) -> None:
        form = QFormLayout()
        form.setLabelAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        form.addRow("First Name:", self.txt_first_name)
        form.addRow("Last Name:", self.txt_last_name)
        form.addRow("Email:", self.txt_email)
        form.addRow("Age:", self.txt_age)
        form.addRow("", self.btn_add_user)

        add_group = QGroupBox("Add New User")
        add_group.setLayout(form)

        controls = QHBoxLayout()
        controls.addWidget(self.cbo_structures, 1)
        controls.addWidget(self.btn_load_data)
        controls.addWidget(self.btn_export)

        demo_layout = QVBoxLayout()
        demo_layout.addLayout(controls)
        demo_layout.addWidget(self.txt_output)

        demo_group = QGroupBox("Data Structures Demo")
        demo_group.setLayout(demo_layout)

        layout = QVBoxLayout()
        layout.addWidget(add_group)
        layout.addWidget(demo_group, 1)

        container = QWidget()
        container.setLayout(layout)
        self.setCentralWidget(container)

    def _populate_structures(self) -> None:
        self.cbo_structures.clear()
        for kind in ContainerKind:
            self.cbo_structures.addItem(kind.label, kind.value)
        if self.cbo_structures.count() > 0:
            self.cbo_structures.setCurrentIndex(0)

    def _connect_signals(self) -> None:
        self.btn_add_user.clicked.connect(self._on_add_user)
        self.btn_load_data.clicked.connect(self._on_load_data)
        self.btn_export.clicked.connect(self._on_export)

    def _apply_styles(self) -> None:
        self.setStyleSheet(
            """
            QWidget {
                background-color: #f8fafc;
                font-family: 'Segoe UI', 'Open Sans', sans-serif;
                font-size: 9pt;
                color: #1f2933;
            }
            QGroupBox {
                font-weight: 700;
                border: 1px solid #cbd5e1;
                border-radius: 8px;
                margin-top: 12px;
                padding: 10px;
            }
            QLineEdit, QComboBox, QPlainTextEdit {
                border: 1px solid #cbd5e1;
                border-radius: 6px;
                padding: 5px 8px;
                background: #fff;
            }
            QPushButton {
                background: #2563eb;
                color: #fff;
                border: none;
                border-radius: 8px;
                padding: 7px 14px;
                font-weight: 600;
            }
            QPushButton:hover {
                background: #1d4ed8;
            }
            """
        )

    # ------------------------------------------------------------------
    # Eventos y acciones
    # ------------------------------------------------------------------
    def _snapshot_form(self) -> UserDraft:
        return UserDraft(
            first_name=self.txt_first_name.text(),
            last_name=self.txt_last_name.text(),
            email=self.txt_email.text(),
            age=self.txt_age.text(),
        )

    def _on_add_user(self) -> None:  # pragma: no cover - UI
        draft = self._snapshot_form()
        try:
            usuario = self.user_service.agregar_usuario(draft)
        except ValidationError as exc:
            QMessageBox.warning(self, "Validation Error", str(exc))
            return
        except StoreError as exc:
            QMessageBox.critical(self, "Error", f"Error adding user: {exc}")
            return

        QMessageBox.information(self, "Success", "User added successfully!")
        self.statusBar().showMessage(f"User {usuario.email} added with id {usuario.id}", 5000)
        self._clear_form()
        self._on_load_data()

    def _clear_form(self) -> None:
        for campo in (self.txt_first_name, self.txt_last_name, self.txt_email, self.txt_age):
            campo.clear()
        self.txt_first_name.setFocus()

    def _on_load_data(self) -> None:  # pragma: no cover - UI
        kind_key = self.cbo_structures.currentData()
        try:
            reporte = self.user_service.generar_reporte(kind_key)
            total = self.user_service.contar_usuarios()
        except StoreError as exc:
            QMessageBox.critical(self, "Error", f"Error loading data: {exc}")
            return

        self.txt_output.setPlainText(reporte)
        self.statusBar().showMessage(f"Data loaded: {total} users stored", 4000)

    def _on_export(self) -> None:  # pragma: no cover - UI
        save_name, _ = QFileDialog.getSaveFileName(
            self, "Export users", "users.csv", "CSV (*.csv);;JSON (*.json)"
        )
        if not save_name:
            return

        try:
            total = self.user_service.exportar(save_name)
        except (StoreError, OSError) as exc:
            QMessageBox.critical(self, "Error", f"Error exporting users: {exc}")
            return

        QMessageBox.information(self, "Exported", f"{total} users saved to {save_name}")


__all__ = ["MainWindow"]
