"""chat-to-prompt -- flatten role-tagged chat messages into a completion prompt."""

__version__ = '0.1.0'
