import json

from dataclasses import dataclass

from shapely.geometry import LineString

from meanderx.ecology.ecology import EcologicalAssessment
from meanderx.hydraulics.hydraulics import HydraulicMetrics
from meanderx.params import StreamParams


@dataclass(frozen=True)
class ChannelDesign:
    params: StreamParams
    meander: LineString
    metrics: HydraulicMetrics
    assessment: EcologicalAssessment

    @property
    def health(self):
        return self.assessment.health

    @property
    def warnings(self):
        return self.assessment.warnings

    def to_dict(self):
        """design report: inputs, centerline coordinates and results"""
        return {
            "params": self.params.to_dict(),
            "meander": [list(c) for c in self.meander.coords],
            "metrics": self.metrics.to_dict(),
            "ecology": self.assessment.to_dict(),
        }

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), indent=4)
