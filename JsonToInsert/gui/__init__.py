# tkinter is only imported by .app, so the controller works without a display
from .controller import ConversionController, UserMessage

__all__ = [
    'ConversionController',
    'UserMessage',
]
