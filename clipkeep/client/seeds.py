"""Clips created the first time a user opens an empty collection."""

from clipkeep.client.schemas import ClipFormData

DEFAULT_SEED_CLIPS: tuple[ClipFormData, ...] = (
    ClipFormData(title="Email signature", content="Best regards,\nYour Name"),
    ClipFormData(title="Meeting link", content="https://meet.example.com/your-room"),
    ClipFormData(title="Address", content="123 Main Street, Springfield"),
    ClipFormData(title="Thank you", content="Thanks for reaching out! I'll get back to you shortly."),
    ClipFormData(title="Git amend", content="git commit --amend --no-edit"),
)
