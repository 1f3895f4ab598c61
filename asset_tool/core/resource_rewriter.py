"""Post-extraction rewrites of vendored files"""

import logging
from pathlib import Path
from typing import Iterable, List

from ..api.exceptions import RewriteError
from ..models.config import RewriteRule
from ..utils.file_utils import atomic_write

logger = logging.getLogger(__name__)


class ResourceRewriter:
    """Replaces hard-coded external references with vendored local copies

    Each rule is a literal substring substitution. After a rule ran its
    pattern must no longer appear in the file, so running a rule twice is a
    no-op.
    """

    def __init__(self, rules: Iterable[RewriteRule]):
        self.rules: List[RewriteRule] = list(rules)

    def rewrite(self, file_path: Path, rule: RewriteRule) -> bool:
        """
        Apply one rule to one file

        Args:
            file_path: File to rewrite in place
            rule: Substitution to apply

        Returns:
            True if the file content changed

        Raises:
            FileNotFoundError: If the file does not exist
            RewriteError: If the pattern is still present afterwards
        """
        content = file_path.read_text(encoding="utf-8")
        updated = content.replace(rule.pattern, rule.replacement, 1)

        if rule.pattern in updated:
            raise RewriteError(file_path, rule.pattern)

        if updated == content:
            logger.debug("%s already rewritten", file_path)
            return False

        atomic_write(file_path, updated)
        logger.info("Replaced %s with %s in %s", rule.pattern, rule.replacement, file_path)
        return True

    def apply(self, base_dir: Path) -> List[Path]:
        """
        Apply every rule relative to a directory

        Args:
            base_dir: Directory the rule paths are relative to

        Returns:
            Files that changed
        """
        changed = []
        for rule in self.rules:
            target = base_dir / rule.file
            if self.rewrite(target, rule):
                changed.append(target)
        return changed
