"""
Filesystem Applier
Manifest를 순서대로 디스크에 적용하고 항목별 결과를 보고

- 이미 존재하는 항목은 건드리지 않음 (ALREADY_EXISTS)
- 항목별 실패는 서로 독립적이며 다음 항목으로 계속 진행 (FAILED)
- 경로 해석 오류(InvalidPathError)는 적용 전에 발생하며 호출자에게 전파
"""

from pathlib import Path
from typing import List, Tuple, Union

from mlscaffold.scaffold.exceptions import EntryCreationError, InvalidPathError
from mlscaffold.scaffold.models import ApplyResult, EntryKind, Manifest, Outcome, PathEntry
from mlscaffold.scaffold.resolver import resolve
from mlscaffold.utils.core.logger import log_scaf_debug, log_scaf_warning


class FilesystemApplier:
    """
    Manifest 적용기.

    같은 manifest를 두 번 적용하면 두 번째는 이전에 실패한 항목의 재시도를 제외하고
    아무것도 변경하지 않습니다.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def apply(self, manifest: Manifest, project_root: Union[str, Path]) -> List[ApplyResult]:
        """
        Manifest의 모든 항목을 순서대로 생성.

        Args:
            manifest: 적용할 Manifest
            project_root: 프로젝트 루트 디렉토리

        Returns:
            항목 순서와 동일한 ApplyResult 목록

        Raises:
            InvalidPathError: 항목 경로가 프로젝트 루트를 벗어나는 경우 (아무것도 생성하지 않음)
        """
        resolved: List[Tuple[PathEntry, Path]] = []
        for entry in manifest:
            try:
                resolved.append((entry, resolve(project_root, entry.relative_path)))
            except InvalidPathError as e:
                e.phase = manifest.phase
                raise

        results = []
        for entry, path in resolved:
            if entry.kind is EntryKind.DIRECTORY:
                result = self._apply_directory(entry, path, manifest.phase)
            else:
                result = self._apply_file(entry, path, manifest.phase)
            results.append(result)
        return results

    def _apply_directory(self, entry: PathEntry, path: Path, phase: str) -> ApplyResult:
        # 같은 이름의 파일이 이미 있으면 FileExistsError로 실패 처리
        try:
            if path.is_dir():
                log_scaf_debug(f"exists   {entry.relative_path}/", phase)
                return ApplyResult(entry, Outcome.ALREADY_EXISTS, path)
            path.mkdir(parents=True)
        except OSError as e:
            return self._failed(entry, path, phase, e)

        log_scaf_debug(f"created  {entry.relative_path}/", phase)
        return ApplyResult(entry, Outcome.CREATED, path)

    def _apply_file(self, entry: PathEntry, path: Path, phase: str) -> ApplyResult:
        try:
            # 깨진 심볼릭 링크도 "존재"로 취급
            if path.exists() or path.is_symlink():
                log_scaf_debug(f"exists   {entry.relative_path}", phase)
                return ApplyResult(entry, Outcome.ALREADY_EXISTS, path)
            with open(path, "x", encoding=self.encoding) as f:
                if entry.content:
                    f.write(entry.content)
        except FileExistsError:
            log_scaf_debug(f"exists   {entry.relative_path}", phase)
            return ApplyResult(entry, Outcome.ALREADY_EXISTS, path)
        except OSError as e:
            return self._failed(entry, path, phase, e)

        log_scaf_debug(f"created  {entry.relative_path}", phase)
        return ApplyResult(entry, Outcome.CREATED, path)

    def _failed(self, entry: PathEntry, path: Path, phase: str, error: OSError) -> ApplyResult:
        creation_error = EntryCreationError(entry.relative_path, error, phase=phase)
        log_scaf_warning(f"failed   {entry.relative_path}: {creation_error.reason}", phase)
        return ApplyResult(entry, Outcome.FAILED, path, creation_error)
