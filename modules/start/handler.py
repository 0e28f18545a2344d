from core import texts
from core.actions import OutText
from core.markdown import escape_markdown


def get_start_reply():
    return [OutText(text=escape_markdown(texts.WELCOME))]
