"""
Read-only module catalog.
"""

from typing import Optional

from ..models import Module


class ModuleCatalog:
    """
    Immutable lookup from module code to Module.

    The engines only ever read from the catalog. A code that is missing from
    the catalog is not an error anywhere in the engine: its credits count as 0
    and checks that need catalog data skip it.

    Usage:
        catalog = ModuleCatalog([Module("MA1301", module_credit="4"), ...])
        catalog.get("MA1301")           # Module or None
        catalog.credit_value("XX9999")  # 0
    """

    def __init__(self, modules=()):
        self._modules = {}
        for module in modules:
            # Later records win, matching how a registry insert behaves
            self._modules[module.code] = module

    def get(self, module_code: str) -> Optional[Module]:
        return self._modules.get(module_code)

    def __contains__(self, module_code) -> bool:
        return module_code in self._modules

    def __len__(self) -> int:
        return len(self._modules)

    def __iter__(self):
        return iter(self._modules.values())

    def codes(self) -> list:
        return sorted(self._modules)

    def credit_value(self, module_code: str) -> int:
        """Catalog credits for a module; 0 when the module is unknown."""
        module = self._modules.get(module_code)
        return module.credit_value if module else 0

    def search(self, query: str) -> list:
        """
        Case-insensitive search on module code prefix or title substring.

        Results are sorted by module code.
        """
        needle = query.strip().lower()
        if not needle:
            return []
        matches = [
            m for m in self._modules.values()
            if m.code.lower().startswith(needle) or needle in m.title.lower()
        ]
        return sorted(matches, key=lambda m: m.code)
