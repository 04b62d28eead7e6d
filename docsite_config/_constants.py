"""Common literal values used across docsite_config.

These constants keep raw declaration keys, defaults, and accepted values in
one place so the validator, serializer, CLI, and tests cannot drift apart.
Intended for internal use within the docsite_config package.

Examples
--------
>>> from docsite_config import _constants
>>> "separate" in _constants.ON_PAGE_NAV_STYLES
True
>>> _constants.BOOLEAN_DEFAULTS["cleanUrl"]
True
"""

from pathlib import Path

DEFAULT_CONFIG_PATH = Path("website/siteConfig.yaml")

REQUIRED_FIELDS = ("title", "url", "baseUrl")

ON_PAGE_NAV_STYLES = ("separate",)

BOOLEAN_DEFAULTS: dict[str, bool] = {
    "cleanUrl": True,
    "scrollToTop": False,
    "docsSideNavCollapsible": False,
    "disableHeaderTitle": False,
    "wrapPagesHTML": False,
}

OPTIONAL_TEXT_FIELDS = (
    "tagline",
    "organizationName",
    "projectName",
    "gaTrackingId",
    "headerIcon",
    "footerIcon",
    "favicon",
    "ogImage",
    "twitterImage",
)

LEGACY_SEARCH_KEY = "algolia"

GITHUB_BASE = "https://github.com"

CSS_NAMED_COLORS = frozenset(
    """
    aliceblue antiquewhite aqua aquamarine azure beige bisque black
    blanchedalmond blue blueviolet brown burlywood cadetblue chartreuse
    chocolate coral cornflowerblue cornsilk crimson cyan darkblue darkcyan
    darkgoldenrod darkgray darkgreen darkgrey darkkhaki darkmagenta
    darkolivegreen darkorange darkorchid darkred darksalmon darkseagreen
    darkslateblue darkslategray darkslategrey darkturquoise darkviolet
    deeppink deepskyblue dimgray dimgrey dodgerblue firebrick floralwhite
    forestgreen fuchsia gainsboro ghostwhite gold goldenrod gray green
    greenyellow grey honeydew hotpink indianred indigo ivory khaki lavender
    lavenderblush lawngreen lemonchiffon lightblue lightcoral lightcyan
    lightgoldenrodyellow lightgray lightgreen lightgrey lightpink lightsalmon
    lightseagreen lightskyblue lightslategray lightslategrey lightsteelblue
    lightyellow lime limegreen linen magenta maroon mediumaquamarine
    mediumblue mediumorchid mediumpurple mediumseagreen mediumslateblue
    mediumspringgreen mediumturquoise mediumvioletred midnightblue mintcream
    mistyrose moccasin navajowhite navy oldlace olive olivedrab orange
    orangered orchid palegoldenrod palegreen paleturquoise palevioletred
    papayawhip peachpuff peru pink plum powderblue purple rebeccapurple red
    rosybrown royalblue saddlebrown salmon sandybrown seagreen seashell
    sienna silver skyblue slateblue slategray slategrey snow springgreen
    steelblue tan teal thistle tomato turquoise violet wheat white
    whitesmoke yellow yellowgreen transparent
    """.split()
)
