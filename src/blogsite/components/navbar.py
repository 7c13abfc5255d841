"""Site header with brand, social links and section navigation."""

from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.element import Tag

from blogsite.config import BLOGSITE_GITHUB_URL, BLOGSITE_LINKEDIN_URL, BLOGSITE_SITE_AUTHOR

_SOCIAL_LINKS = (
    ("GitHub", BLOGSITE_GITHUB_URL, "hover:text-black"),
    ("LinkedIn", BLOGSITE_LINKEDIN_URL, "hover:text-[#0A66C2]"),
)
_NAV_LINKS = (("Blog", "/blog"),)


def navbar() -> Tag:
    soup = BeautifulSoup("", "html.parser")
    header = soup.new_tag("header", attrs={"class": "bg-white border-b sticky top-0 z-50 backdrop-blur"})
    nav = soup.new_tag(
        "nav",
        attrs={"class": "container mx-auto px-4 py-3 flex items-center justify-between"},
    )

    brand = soup.new_tag("div", attrs={"class": "flex items-center gap-6"})
    home = soup.new_tag("a", attrs={"href": "/", "class": "font-semibold text-lg"})
    home.string = BLOGSITE_SITE_AUTHOR
    brand.append(home)

    socials = soup.new_tag("div", attrs={"class": "flex items-center gap-4"})
    for label, url, hover_class in _SOCIAL_LINKS:
        link = soup.new_tag(
            "a",
            attrs={
                "href": url,
                "target": "_blank",
                "rel": "noopener noreferrer",
                "aria-label": label,
                "class": f"text-gray-600 {hover_class} transition-colors",
            },
        )
        link.string = label
        socials.append(link)
    brand.append(socials)

    links = soup.new_tag("div", attrs={"class": "space-x-4"})
    for label, href in _NAV_LINKS:
        link = soup.new_tag("a", attrs={"href": href, "class": "text-gray-700 hover:text-primary"})
        link.string = label
        links.append(link)

    nav.append(brand)
    nav.append(links)
    header.append(nav)
    return header
