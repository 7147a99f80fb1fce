import logging

from PySide6.QtWidgets import QMessageBox, QWidget

logger = logging.getLogger(__name__)


def ask_quit_confirmation(parent: QWidget = None) -> bool:
    """Shows the modal quit prompt. Returns True only when the user picks Quit."""
    box = QMessageBox(parent)
    box.setIcon(QMessageBox.Icon.Warning)
    box.setWindowTitle("Quit")
    box.setText("Quit FloatChat")
    box.setInformativeText("Are you sure you want to quit FloatChat?")
    quit_button = box.addButton("Quit", QMessageBox.ButtonRole.AcceptRole)
    cancel_button = box.addButton("Cancel", QMessageBox.ButtonRole.RejectRole)
    box.setDefaultButton(quit_button)
    box.setEscapeButton(cancel_button)
    box.exec()
    confirmed = box.clickedButton() is quit_button
    logger.debug("[QuitDialog] User chose %s", "Quit" if confirmed else "Cancel")
    return confirmed
