"""Extract structured answers from issue template bodies.

Issues opened through the bug report template carry markdown sections such
as ``### Impacted plugin`` followed by the reporter's answer. Issues opened
without the template simply produce empty results.
"""

import logging
import re

from .models import ImpactSignal

logger = logging.getLogger(__name__)

PLUGIN_PATTERN = re.compile(r"###\sImpacted\splugin\n\n([a-zA-Z ,]*)\n\n")
PLATFORM_PATTERN = re.compile(
    r"###\sPlatform\s\(Simple\sand/or\sAtomic\)\n\n([a-zA-Z ,-]*)\n\n"
)
IMPACT_PATTERN = re.compile(
    r"###\sImpact\n\n(?P<impact>.*)\n\n###\sAvailable\sworkarounds\?\n\n"
    r"(?P<workaround>.*)\n"
)

# Not a triageable platform
SELF_HOSTED = "Self-hosted"

PLUGIN_LABEL_PREFIX = "[Plugin] "
PLATFORM_LABEL_PREFIX = "[Platform] "


def _normalize(body: str | None) -> str:
    if not body:
        return ""
    return body.replace("\r\n", "\n")


def _split_list(answer: str) -> list[str]:
    return [item.strip() for item in answer.split(",") if item.strip()]


def parse_plugins(body: str | None) -> list[str]:
    """Find the plugins impacted by an issue.

    Args:
        body: Issue body markdown

    Returns:
        Plugin names in the order the reporter listed them
    """
    match = PLUGIN_PATTERN.search(_normalize(body))
    if not match:
        logger.debug("No plugin indicators found.")
        return []
    return _split_list(match.group(1))


def parse_platforms(body: str | None) -> list[str]:
    """Find the platforms impacted by an issue, ignoring self-hosted sites."""
    match = PLATFORM_PATTERN.search(_normalize(body))
    if not match:
        logger.debug("No platform indicators found.")
        return []
    return [p for p in _split_list(match.group(1)) if p != SELF_HOSTED]


def parse_impact_signal(body: str | None) -> ImpactSignal | None:
    """Find the reported impact and workaround answers.

    Returns:
        ImpactSignal, or None when the body does not follow the template
    """
    match = IMPACT_PATTERN.search(_normalize(body))
    if not match:
        logger.debug("No priority indicators found.")
        return None

    signal = ImpactSignal(
        impact=match.group("impact").strip(),
        workaround=match.group("workaround").strip(),
    )
    logger.debug(
        'Reported priority indicators: "%s" / "%s"', signal.impact, signal.workaround
    )
    return signal


def plugin_labels(plugins: list[str]) -> list[str]:
    return [f"{PLUGIN_LABEL_PREFIX}{plugin}" for plugin in plugins]


def platform_labels(platforms: list[str]) -> list[str]:
    return [f"{PLATFORM_LABEL_PREFIX}{platform}" for platform in platforms]
