from typing import Iterable, List


class SpecBuildError(ValueError):
    """Raised when the OpenAPI document is internally inconsistent.

    Carries every problem found so a single start-up failure reports them all.
    """

    def __init__(self, problems: Iterable[str]):
        self.problems: List[str] = list(problems)
        summary = '; '.join(self.problems[:5])
        more = len(self.problems) - 5
        if more > 0:
            summary += f' (+{more} more)'
        super().__init__(f'OpenAPI document is inconsistent: {summary}')


__all__ = ['SpecBuildError']
