"""Parsing of debugger replies to symbol queries."""


def parse_tag_reply(reply: str, symbol: str) -> str:
    """Extract the string value from the reply to a '<symbol>/s' query.

    The value is the second whitespace-separated token with trailing commas
    removed, e.g. 'mdbv8_vers_tag: release,' or '0xfeed: release,'. When the
    reply carries both a leading symbol label and an address, as in
    'mdbv8_vers_tag 0xfeed release,', the label is dropped first.

    Returns:
        The tag value, or "" if the reply does not contain one
    """
    tokens = reply.split()
    if len(tokens) >= 3 and tokens[0].rstrip(":") == symbol:
        tokens = tokens[1:]
    if len(tokens) < 2:
        return ""
    return tokens[1].rstrip(",")
