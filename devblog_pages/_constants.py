"""Common literal values used across devblog_pages.

These constants keep output filenames and the index sentinel centralized so
templates, generators, and tests can import the same values without drifting.
Intended for internal use within the devblog_pages package.

Examples
--------
>>> from devblog_pages import _constants
>>> _constants.PAGE_FILENAME_TEMPLATE.format(slug="cleaning-up-sql-access")
'cleaning-up-sql-access.html'
>>> _constants.INDEX_SLUG
'index'
"""

INDEX_SLUG = "index"
PAGE_FILENAME_TEMPLATE = "{slug}.html"
DEFAULT_BACK_LABEL = "Back to index"
DEFAULT_CODE_LANGUAGE = "text"
DEFAULT_SITE_TITLE = "Articles"
