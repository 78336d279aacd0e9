"""
URL Helper Functions for the admin entry point

The admin UI is reached through a single entry point
(``/site-admin/admin.php``) and a logical page key carried in the query
string (``?page=site-editor``). These helpers build those URLs so views,
templates and the browser suite agree on one contract.
"""

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

ADMIN_ROOT = "/site-admin/"


def add_query_args(url, args):
    """
    Append query arguments to a URL, replacing any with the same name.

    Args:
        url: Base URL, absolute or relative. May be empty.
        args: Mapping (or iterable of pairs) of argument names to values.
              ``None`` values are dropped.

    Returns:
        str: URL with the merged query string

    Examples:
        >>> add_query_args('', {'page': 'site-editor'})
        '?page=site-editor'

        >>> add_query_args('/site-admin/admin.php?page=templates', {'page': 'experiments'})
        '/site-admin/admin.php?page=experiments'
    """
    pairs = args.items() if hasattr(args, "items") else args
    scheme, netloc, path, query, fragment = urlsplit(url)
    merged = dict(parse_qsl(query, keep_blank_values=True))
    for key, value in pairs:
        if value is None:
            continue
        merged[key] = str(value)
    return urlunsplit((scheme, netloc, path, urlencode(merged), fragment))


def admin_url(path, query=None):
    """
    Build a path under the admin root.

    ``query`` may be a preformatted query string (``'page=site-editor'``) or a
    mapping of arguments.

    Examples:
        >>> admin_url('admin.php', 'page=site-editor')
        '/site-admin/admin.php?page=site-editor'

        >>> admin_url('admin.php', {'page': 'experiments'})
        '/site-admin/admin.php?page=experiments'
    """
    url = ADMIN_ROOT + path.lstrip("/")
    if not query:
        return url
    if isinstance(query, str):
        return add_query_args(url, parse_qsl(query.lstrip("?"), keep_blank_values=True))
    return add_query_args(url, query)


def build_absolute_url(path, base):
    """
    Join a server base URL (e.g. a live test server) and a path.

    Examples:
        >>> build_absolute_url('/site-admin/admin.php', 'http://localhost:8081/')
        'http://localhost:8081/site-admin/admin.php'
    """
    base = base.rstrip("/")
    path = path.lstrip("/")
    return f"{base}/{path}"
