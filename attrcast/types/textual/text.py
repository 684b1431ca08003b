from __future__ import annotations

from .string import String


class Text(String):
    """ Very similar to :class:`String`, but for long contents: values are
        never truncated.
    """
    type = 'text'
    _options = ()
    limit = None

    def __init__(self, **options):
        # skip String.__init__, there is no limit to accept
        super(String, self).__init__(**options)
