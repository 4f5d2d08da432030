from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class UIState:
    length: float = 100.0
    height: float = 25.0
    angle_deg: float = 20.0
    plan_area: Optional[float] = None
    last_windward: Dict[str, Any] = field(default_factory=dict)
    last_leeward: Dict[str, Any] = field(default_factory=dict)
    last_zones: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def h_over_l(self) -> float:
        return self.height / self.length if self.length > 0 else 0.0
