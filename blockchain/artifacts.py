"""
Artifact Store
Resolves contract names to compiled Hardhat artifacts (ABI + bytecode)
"""

import json
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union
from loguru import logger

from .exceptions import (
    AmbiguousArtifactError,
    ArtifactNotFoundError,
    InvalidArtifactError,
)

DEFAULT_ARTIFACTS_DIR = "artifacts"

# Library placeholders left by solc when a contract links external libraries
LINK_PLACEHOLDER = re.compile(r"__\$[0-9a-fA-F]{34}\$__")


@dataclass(frozen=True)
class ContractArtifact:
    """Compiled contract as written by `npx hardhat compile`"""

    contract_name: str
    source_name: str
    abi: List[Dict]
    bytecode: str

    @property
    def fully_qualified_name(self) -> str:
        return f"{self.source_name}:{self.contract_name}"

    @property
    def is_deployable(self) -> bool:
        """Interfaces and abstract contracts compile to empty bytecode"""
        return self.bytecode not in ("", "0x")

    @property
    def has_unlinked_libraries(self) -> bool:
        return LINK_PLACEHOLDER.search(self.bytecode) is not None


class ArtifactStore:
    """
    Looks up artifacts under a Hardhat artifacts directory

    Layout: <root>/<source path>/<ContractName>.json
    Debug files (*.dbg.json) and build-info/ are ignored.
    """

    def __init__(self, root: Optional[Union[Path, str]] = None):
        """
        Initialize Artifact Store

        Args:
            root: Artifacts directory (defaults to DEPLOY_ARTIFACTS_DIR or ./artifacts)
        """
        if root is None:
            root = os.getenv("DEPLOY_ARTIFACTS_DIR", DEFAULT_ARTIFACTS_DIR)
        self.root = Path(root)

    def get_artifact(self, name: str) -> ContractArtifact:
        """
        Resolve a contract name to its artifact

        Args:
            name: Bare name ("ChainGallery") or fully-qualified
                  name ("contracts/ChainGallery.sol:ChainGallery")

        Returns:
            Parsed artifact

        Raises:
            ArtifactNotFoundError: No artifact matches the name
            AmbiguousArtifactError: A bare name matches several sources
        """
        if ":" in name:
            source_name, contract_name = name.rsplit(":", 1)
            path = self.root / source_name / f"{contract_name}.json"
            if not path.is_file():
                raise ArtifactNotFoundError(
                    f"Artifact for contract \"{name}\" not found in {self.root}"
                )
            return self._load(path)

        candidates = self._find_by_contract_name(name)

        if not candidates:
            raise ArtifactNotFoundError(
                f"Artifact for contract \"{name}\" not found in {self.root}. "
                "Run 'npx hardhat compile' first"
            )

        if len(candidates) > 1:
            names = sorted(
                f"{path.parent.relative_to(self.root).as_posix()}:{name}"
                for path in candidates
            )
            raise AmbiguousArtifactError(
                f"There are multiple artifacts for contract \"{name}\", "
                f"please use a fully qualified name instead: {', '.join(names)}"
            )

        return self._load(candidates[0])

    def artifact_exists(self, name: str) -> bool:
        """Check whether exactly one artifact resolves for the name"""
        try:
            self.get_artifact(name)
            return True
        except (ArtifactNotFoundError, AmbiguousArtifactError, InvalidArtifactError):
            return False

    def _find_by_contract_name(self, name: str) -> List[Path]:
        if not self.root.is_dir():
            return []

        matches = []
        for path in self.root.rglob(f"{name}.json"):
            relative = path.relative_to(self.root)
            if relative.parts[0] == "build-info":
                continue
            matches.append(path)

        return matches

    def _load(self, path: Path) -> ContractArtifact:
        """Parse an artifact file"""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidArtifactError(f"Artifact {path} is not valid JSON: {e}") from e
        except OSError as e:
            raise InvalidArtifactError(f"Artifact {path} cannot be read: {e}") from e

        if not isinstance(data, dict) or "abi" not in data or "bytecode" not in data:
            raise InvalidArtifactError(f"Artifact {path} is missing abi or bytecode")

        artifact = ContractArtifact(
            contract_name=data.get("contractName", path.stem),
            source_name=data.get("sourceName", path.parent.relative_to(self.root).as_posix()),
            abi=data["abi"],
            bytecode=data["bytecode"] or "",
        )

        logger.debug(f"Loaded artifact {artifact.fully_qualified_name} from {path}")
        return artifact
