"""Presentational components rendered with BeautifulSoup."""

from blogsite.components.blog_index import blog_index, category_label
from blogsite.components.footer import footer
from blogsite.components.mdx_heading import H2, H3, H4, H5, H6, apply_heading_ids, render_heading
from blogsite.components.navbar import navbar
from blogsite.components.table_of_contents import TableOfContents, WatchSubscription

__all__ = [
    "H2",
    "H3",
    "H4",
    "H5",
    "H6",
    "TableOfContents",
    "WatchSubscription",
    "apply_heading_ids",
    "blog_index",
    "category_label",
    "footer",
    "navbar",
    "render_heading",
]
