"""Type aliases used across idverify."""

from __future__ import annotations

from typing import Any

JsonDict = dict[str, Any]
IdNumber = str
FeatureName = str
OperationName = str
