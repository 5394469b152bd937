from __future__ import annotations

import os

from hypothesis import settings

# CI runs derandomized so grammar and classifier failures reproduce across machines
settings.register_profile(
    "a11ylint-ci",
    derandomize=True,
    max_examples=50,
    deadline=None,
    print_blob=True,
)
settings.register_profile("a11ylint-dev", max_examples=200, deadline=None)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "a11ylint-ci"))
