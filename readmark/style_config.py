# -*- coding: utf-8 -*-
"""Stylesheet for the status classes emitted by the renderer.

Each rule names the element it targets; set ``enabled=False`` to drop one.
"""

from dataclasses import dataclass
from typing import Iterable, List


@dataclass
class StyleRule:
    selector: str
    target: str
    css: str
    enabled: bool = True

    def to_css(self) -> str:
        return f"{self.selector}{{{self.css}}}"


def build_style_block(rules: Iterable["StyleRule"]) -> str:
    body = "".join(rule.to_css() for rule in rules if rule.enabled)
    return f"<style>{body}</style>"


STYLE_RULES: List[StyleRule] = [
    StyleRule(
        selector=".article",
        target="article container",
        css="line-height:1.7;font-size:1rem",
    ),
    StyleRule(
        selector=".article p",
        target="paragraph",
        css="margin:0 0 .8rem 0",
    ),
    StyleRule(
        selector=".stns",
        target="sentence",
        css="display:inline;box-decoration-break:clone",
    ),
    StyleRule(
        selector=".word,.phrase",
        target="tokens",
        css="padding:.02rem .06rem;border-radius:.15rem;cursor:pointer",
    ),
    StyleRule(
        selector=".word.new",
        target="new word",
        css="background-color:rgba(100,149,237,.22)",
    ),
    StyleRule(
        selector=".word.learning,.phrase.learning",
        target="learning",
        css="background-color:rgba(255,99,71,.25)",
    ),
    StyleRule(
        selector=".word.familiar,.phrase.familiar",
        target="familiar",
        css="background-color:rgba(255,165,0,.22)",
    ),
    StyleRule(
        selector=".word.known,.phrase.known",
        target="known",
        css="background-color:rgba(255,215,0,.18)",
    ),
    StyleRule(
        selector=".word.learned,.word.ignore",
        target="learned / ignored word",
        css="background-color:transparent",
    ),
    StyleRule(
        selector=".phrase",
        target="phrase outline",
        css="border-bottom:1px dashed #c28150",
    ),
    StyleRule(
        selector=".phrase.ignore,.phrase.learned",
        target="ignored / learned phrase",
        css="border-bottom:none",
    ),
    StyleRule(
        selector=".other",
        target="numbers and CJK",
        css="color:inherit",
        enabled=False,
    ),
]

STYLE_BLOCK = build_style_block(STYLE_RULES)
