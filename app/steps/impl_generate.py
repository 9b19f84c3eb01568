from pydantic import ValidationError
from app.core.workflow import ExportStage
from app.generators.feature_gen.generator import generate_feature_files
from app.generators.feature_gen.writer import write_files
from app.schemas.features import FeatureDefinition
from app.steps.base import BaseStep, StepResult

class GenerateStep(BaseStep):
    stage = ExportStage.GENERATE
    def run(self, job, ws):
        try:
            definition = FeatureDefinition.model_validate(job.definition)
        except ValidationError as e:
            return StepResult(
                self.stage,
                False,
                f"Invalid feature definition: {e.error_count()} validation error(s)",
                {}
            )

        config, fields, relations = definition.to_model()
        files = generate_feature_files(config, fields, relations)
        write_files(files, ws.files_dir)

        return StepResult(
            self.stage,
            True,
            f"Generated {len(files)} feature files",
            {
                "files_dir": str(ws.files_dir.relative_to(ws.root)),
                "files": [f.path for f in files],
            }
        )
