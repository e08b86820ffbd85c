"""
Family network model for phenoadapt.

This module defines the ``Individual`` and ``FamilyUnion`` records and the
``FamilyNetwork`` registry that owns them. Unions are registered explicitly
as mother/father pairs and are kept in insertion order so that iterating the
network, and therefore scoring it, is deterministic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional

from .genes import GeneticDistanceResult, compute_distance
from .genome import NeurodivergenceProfile, predict_neurodivergence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Individual:
    """A family member and the genetic markers they carry."""

    id: str
    markers: FrozenSet[str]
    # excluded from eq and hash so individuals stay hashable
    phenotype: Mapping[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_markers(
        cls,
        id: str,
        markers: Iterable[str],
        phenotype: Optional[Mapping[str, Any]] = None,
    ) -> "Individual":
        return cls(id=id, markers=frozenset(markers), phenotype=dict(phenotype or {}))


@dataclass(frozen=True)
class FamilyUnion:
    """A registered mother/father pair."""

    union_id: str
    mother: Individual
    father: Individual
    genetic_distance: float = 0.0  # not computed yet


class FamilyNetwork:
    """Registry of family unions and the individuals that belong to them."""

    def __init__(self) -> None:
        self._unions: Dict[str, FamilyUnion] = {}
        self._individuals: Dict[str, Individual] = {}

    @property
    def unions(self) -> Mapping[str, FamilyUnion]:
        return MappingProxyType(self._unions)

    @property
    def individuals(self) -> Mapping[str, Individual]:
        return MappingProxyType(self._individuals)

    def register_union(
        self, union_id: str, mother: Individual, father: Individual
    ) -> FamilyUnion:
        """Register a mother/father pair under ``union_id``.

        Registering an existing id replaces that union but keeps its position.
        An individual id that is already known must carry the same markers;
        the registered record is reused so the union and the registry agree.
        A conflicting id raises ``ValueError`` and nothing is registered.
        """
        mother = self._resolve(mother)
        father = self._resolve(father)
        if father.id == mother.id and father.markers != mother.markers:
            raise ValueError(f"individual {father.id} is registered with two marker sets")
        union = FamilyUnion(union_id=union_id, mother=mother, father=father)
        self._unions[union_id] = union
        for person in (mother, father):
            self._individuals.setdefault(person.id, person)
        logger.debug("Registered union %s (%s x %s)", union_id, mother.id, father.id)
        return union

    def _resolve(self, person: Individual) -> Individual:
        known = self._individuals.get(person.id)
        if known is None:
            return person
        if known.markers != person.markers:
            raise ValueError(
                f"individual {person.id} is already registered with different markers"
            )
        return known

    def get_union(self, union_id: str) -> FamilyUnion:
        return self._unions[union_id]

    def relatives(self) -> List[Individual]:
        """Parents of every union, mother first, each individual listed once."""
        seen = set()
        result: List[Individual] = []
        for union in self._unions.values():
            for person in (union.mother, union.father):
                if person.id in seen:
                    continue
                seen.add(person.id)
                result.append(person)
        return result

    def compute_genetic_distance(
        self, a: Individual, b: Individual
    ) -> GeneticDistanceResult:
        return compute_distance(a.markers, b.markers)

    def predict_neurodivergence(
        self,
        child_markers: Iterable[str],
        relatives: Optional[Iterable[Individual]] = None,
    ) -> NeurodivergenceProfile:
        """Score ``child_markers`` against ``relatives`` or the whole network."""
        if relatives is None:
            relatives = self.relatives()
        return predict_neurodivergence(child_markers, relatives)
