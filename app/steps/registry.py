from dataclasses import dataclass
from typing import Dict
from app.core.workflow import ExportStage
from app.steps.base import BaseStep
from app.steps.impl_generate import GenerateStep
from app.steps.impl_package import PackageStep

@dataclass
class StepRegistry:
    mapping: Dict[ExportStage, BaseStep]

    def get(self, stage: ExportStage) -> BaseStep:
        return self.mapping[stage]

    @staticmethod
    def default() -> "StepRegistry":
        return StepRegistry(mapping={
            ExportStage.GENERATE: GenerateStep(),
            ExportStage.PACKAGE: PackageStep(),
        })
