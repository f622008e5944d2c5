"""Message templates — error text that does not know its field yet.

A rule cannot know which field it validates, so it describes the
problem as a predicate::

    MessageTemplate("must be string")            # "$ must be string"
    MessageTemplate("Invalid start or end date provided", subject=False)

The aggregator renders the template with the field name. Rendering is
structural: the field name goes into the subject slot only, so a
literal ``$`` anywhere in the text is left alone.
"""

from __future__ import annotations

from dataclasses import dataclass

PLACEHOLDER = "$"
_SUBJECT_PREFIX = PLACEHOLDER + " "


@dataclass(frozen=True, slots=True)
class MessageTemplate:
    """Field-agnostic error message.

    ``subject`` puts the field name in front of ``text``. ``inner`` is a
    nested template rendered with the same field name and appended,
    used by rules that report a failure of a rule they delegated to.
    """

    text: str
    subject: bool = True
    inner: MessageTemplate | None = None

    def render(self, field: str) -> str:
        """Return the message with *field* in the subject slot."""
        head = f"{field} {self.text}" if self.subject else self.text
        if self.inner is not None:
            return head + self.inner.render(field)
        return head

    def __str__(self) -> str:
        return self.render(PLACEHOLDER)


def subject(text: str) -> MessageTemplate:
    """Template rendered as ``"{field} {text}"``."""
    return MessageTemplate(text)


def literal(text: str) -> MessageTemplate:
    """Template rendered verbatim, whatever the field name."""
    return MessageTemplate(text, subject=False)


def as_template(message: str | MessageTemplate) -> MessageTemplate:
    """Accept a caller-supplied message as either text or a template.

    A string opening with ``"$ "`` gets the field name in that slot, so
    ``"$ must be digits"`` renders as ``"code must be digits"``. Any
    other string is taken literally.
    """
    if isinstance(message, MessageTemplate):
        return message
    if message.startswith(_SUBJECT_PREFIX):
        return subject(message.removeprefix(_SUBJECT_PREFIX))
    return literal(message)
