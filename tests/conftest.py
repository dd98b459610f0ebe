import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


class ZeroRng:
    """Jitter source that always returns 0."""

    def random(self, size):
        return [0.0] * size


@pytest.fixture
def zero_rng():
    return ZeroRng()
