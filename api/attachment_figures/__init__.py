"""Attachment figures: non-biological relations (`attachment_figures`)."""
