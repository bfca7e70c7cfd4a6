"""Orchestration du traitement par lots des photos et vidéos."""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from loguru import logger
from tqdm import tqdm

from mediaorg.config.options import OrganizerConfig
from mediaorg.filesystem.discovery import get_files
from mediaorg.models.media import FileResult, MediaKind, PlacementDecision
from mediaorg.pipeline.processor import process_single_file


@dataclass
class ProcessingStats:
    """Statistiques du traitement d'un lot."""

    placed: int = 0
    skipped: int = 0
    renamed: int = 0
    failed: int = 0
    total: int = 0

    @classmethod
    def from_results(cls, results: List[FileResult]) -> "ProcessingStats":
        """Calcule les statistiques à partir des résultats par fichier."""
        decisions = [r.placement.decision for r in results if r.success and r.placement]
        return cls(
            placed=sum(1 for d in decisions if d is PlacementDecision.PROCEED),
            skipped=sum(1 for d in decisions if d is PlacementDecision.SKIP_IDENTICAL_EXISTS),
            renamed=sum(1 for d in decisions if d is PlacementDecision.RENAME_DUE_TO_CONFLICT),
            failed=sum(1 for r in results if not r.success),
            total=len(results),
        )

    @property
    def ok(self) -> bool:
        """Vrai si aucun fichier n'a échoué."""
        return self.failed == 0


class PipelineOrchestrator:
    """
    Orchestre la réorganisation d'un lot de fichiers.

    Chaque fichier est une tâche indépendante exécutée dans un pool de
    threads borné par ``config.jobs``. L'échec d'un fichier n'annule
    jamais les autres.
    """

    def __init__(
        self,
        config: OrganizerConfig,
        show_progress: bool = True,
        process_fn: Callable[..., FileResult] = process_single_file,
    ):
        """
        Initialise l'orchestrateur.

        Arguments :
            config: Configuration immuable de l'invocation.
            show_progress: Affiche une barre de progression tqdm.
            process_fn: Traitement d'un fichier (remplaçable pour les tests).
        """
        self.config = config
        self.show_progress = show_progress
        self._process_fn = process_fn
        self.results: List[FileResult] = []

    def _process(self, task: Tuple[Path, MediaKind]) -> FileResult:
        file, kind = task
        return self._process_fn(file, self.config, kind)

    def run(self, files: List[Tuple[Path, MediaKind]]) -> List[FileResult]:
        """
        Traite une liste de fichiers.

        Arguments :
            files: Couples (chemin, type) dans l'ordre d'énumération.

        Retourne :
            Les résultats, dans l'ordre d'énumération.
        """
        if not files:
            return []

        progress = dict(
            desc="Organizing media",
            unit="file",
            total=len(files),
            disable=not self.show_progress,
        )

        if self.config.jobs == 1:
            logger.debug("Sequential processing")
            return [self._process(task) for task in tqdm(files, **progress)]

        logger.debug(f"Parallel processing with {self.config.jobs} workers")
        with ThreadPoolExecutor(max_workers=self.config.jobs) as executor:
            return list(tqdm(executor.map(self._process, files), **progress))

    def process(self, files: Optional[List[Tuple[Path, MediaKind]]] = None) -> ProcessingStats:
        """
        Découvre puis traite les fichiers du répertoire d'entrée.

        Arguments :
            files: Fichiers à traiter; découverts sous ``config.input_dir`` si None.

        Retourne :
            ProcessingStats du lot.
        """
        if files is None:
            files = list(get_files(self.config))
        logger.info(f"{len(files)} file(s) to process in {self.config.input_dir}")

        results = self.run(files)
        self.results = results

        for result in results:
            if not result.success:
                logger.error(f"Failed: {result.source} ({result.error})")

        stats = ProcessingStats.from_results(results)
        logger.info(
            f"Done: {stats.placed} placed, {stats.renamed} renamed, "
            f"{stats.skipped} skipped, {stats.failed} failed"
        )
        return stats
