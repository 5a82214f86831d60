import random
from typing import Optional

import pytest

from notecraft.modules.ai.models import CardPair


SAMPLE_NOTE = """Photosynthesis is the process plants use to turn light into chemical energy. Plants capture light with chlorophyll inside their leaves. The energy from light drives the production of glucose.

Chlorophyll: green pigment that absorbs light energy
Glucose: simple sugar produced during photosynthesis
Stomata: small pores that let carbon dioxide enter leaves

Cellular respiration releases the energy stored in glucose. Animals and plants both rely on respiration to power their cells. Oxygen is consumed and carbon dioxide is released.

- Plants absorb carbon dioxide through tiny pores called stomata
- Water travels from the roots to the leaves through the xylem
- Light reactions happen inside the thylakoid membranes of chloroplasts

The carbon cycle connects photosynthesis and respiration. Carbon moves between the atmosphere, plants and animals in a continuous loop."""


class FakeClient:
    """In-memory ArtifactClient that records calls."""

    def __init__(
        self,
        pairs: Optional[list[tuple[str, str]]] = None,
        text: str = "",
        error: Optional[BaseException] = None,
    ) -> None:
        self.pairs = pairs or []
        self.text = text
        self.error = error
        self.prompts: list[str] = []
        self.card_requests: list[tuple[str, str, int]] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text

    async def generate_card_pairs(self, content: str, title: str, count: int = 15):
        self.card_requests.append((content, title, count))
        if self.error is not None:
            raise self.error
        return [CardPair(front=f, back=b) for f, b in self.pairs]


@pytest.fixture
def sample_note() -> str:
    return SAMPLE_NOTE


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
