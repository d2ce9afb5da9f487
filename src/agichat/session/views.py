"""Navigable content views.

Hides which panels exist and what each one shows. ViewController owns the
active view; VIEW_PANELS is the dispatch table mapping every ViewState to
the content a front end renders for it.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)


class ViewState(str, Enum):
    """Content panels, exactly one of which is active."""

    HOME = "home"
    CONVERSATION = "conversation"
    FEATURES = "features"
    EXAMPLES = "examples"
    SAFETY = "safety"


@dataclass(frozen=True)
class Card:
    """A titled block of descriptive text."""

    title: str
    body: str


@dataclass(frozen=True)
class ViewPanel:
    """Static content of one view."""

    label: str
    title: str
    tagline: str
    cards: tuple[Card, ...] = ()
    prompts: tuple[str, ...] = field(default=())


VIEW_PANELS: dict[ViewState, ViewPanel] = {
    ViewState.HOME: ViewPanel(
        label="What is AGI",
        title="Artificial General Intelligence",
        tagline="Understands, analyzes, and responds to human intelligence at a high level.",
        cards=(
            Card("Understand", "Processes information like a human brain"),
            Card("Analyze", "Evaluates data and contexts deeply"),
            Card("Decide", "Makes autonomous high-level decisions"),
        ),
    ),
    ViewState.CONVERSATION: ViewPanel(
        label="Chat Panel",
        title="How can I help you today?",
        tagline="I am ready to analyze data, write code, and solve complex problems with high precision.",
        prompts=(
            "Explain Quantum Computing",
            "Write a Python script for data analysis",
        ),
    ),
    ViewState.FEATURES: ViewPanel(
        label="Features",
        title="System Capabilities",
        tagline="Advanced neural modules activated for high-performance tasks.",
        cards=(
            Card(
                "GK Analysis Engine",
                "Deep scanning of general knowledge databases to answer complex historical, "
                "scientific, and cultural queries with high precision.",
            ),
            Card(
                "Code Generation",
                "Production-grade code synthesis in Python, TypeScript, Rust, and Go. "
                "Supports complex algorithms and full-stack architecture.",
            ),
            Card(
                "Logical Reasoning",
                "Step-by-step chain of thought processing for riddles, math problems, "
                "and strategic decision making.",
            ),
            Card(
                "Creative Studio",
                "Generative text for storytelling, poetry, and scriptwriting with nuanced "
                "emotional intelligence.",
            ),
        ),
    ),
    ViewState.EXAMPLES: ViewPanel(
        label="Examples",
        title="Example Prompts",
        tagline="Test the AGI with these complex scenarios.",
        prompts=(
            "Generate a React component for a 3D data visualization dashboard using Three.js",
            "Analyze the geopolitical implications of quantum computing in the next decade",
            "Solve this riddle: I speak without a mouth and hear without ears. "
            "I have no body, but I come alive with wind. What am I?",
            "Explain the concept of Neural Radiance Fields (NeRF) to a 10-year-old",
        ),
    ),
    ViewState.SAFETY: ViewPanel(
        label="Safety",
        title="Safety Protocols",
        tagline="Core directives ensuring safe and ethical operation.",
        cards=(
            Card(
                "Ethical Alignment",
                "The AGI is aligned with human values, prioritizing helpfulness, harmlessness, "
                "and honesty. It refuses to generate harmful, biased, or malicious content.",
            ),
            Card(
                "Data Privacy",
                "All interactions are processed with strict privacy standards. No personal data "
                "is permanently stored in the training set without consent.",
            ),
        ),
    ),
}

_missing = set(ViewState) - set(VIEW_PANELS)
if _missing:
    raise RuntimeError(f"VIEW_PANELS has no entry for {sorted(v.value for v in _missing)}")


def panel_for(view: ViewState) -> ViewPanel:
    """Look up the content of a view."""
    return VIEW_PANELS[view]


ViewListener = Callable[[ViewState], None]


class ViewController:
    """Owns the active content view. Starts on HOME."""

    def __init__(self, initial: ViewState = ViewState.HOME) -> None:
        self._active = initial
        self._listeners: list[ViewListener] = []

    @property
    def active(self) -> ViewState:
        return self._active

    @property
    def panel(self) -> ViewPanel:
        return VIEW_PANELS[self._active]

    def navigate(self, view: ViewState) -> None:
        """Make view active. Listeners hear only actual changes."""
        view = ViewState(view)
        if view == self._active:
            return
        logger.debug("View %s -> %s", self._active.value, view.value)
        self._active = view
        for listener in list(self._listeners):
            listener(view)

    def subscribe(self, listener: ViewListener) -> Callable[[], None]:
        """Register a change listener; returns a function that removes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe
