from pathlib import Path
from app.core.workflow import ExportStage
from app.generators.feature_gen.context import NamingContext
from app.generators.feature_gen.packager import PackagingError, build_archive, save_archive
from app.schemas.features import FeatureDefinition
from app.steps.base import BaseStep, StepResult

class PackageStep(BaseStep):
    stage = ExportStage.PACKAGE
    def run(self, job, ws):
        listed = (job.artifacts or {}).get("files", [])
        if not listed:
            return StepResult(self.stage, False, "No generated files to package", {})

        config = FeatureDefinition.model_validate(job.definition).feature_config.to_model()
        ctx = NamingContext.from_config(config)

        # Read back in generation order so the archive matches the direct download
        files = {}
        for rel_path in listed:
            path: Path = ws.files_dir / rel_path
            if not path.exists():
                return StepResult(self.stage, False, f"Generated file missing: {rel_path}", {})
            files[rel_path] = path.read_text(encoding="utf-8")

        try:
            target = save_archive(build_archive(files, ctx.lower), ws.archive_dir / ctx.archive_name)
        except PackagingError as e:
            return StepResult(self.stage, False, str(e), {})

        return StepResult(
            self.stage,
            True,
            f"Packaged {len(files)} files into {target.name}",
            {"archive": str(target.relative_to(ws.root))}
        )
