"""Vote set storage shared by the question and answer repositories.

A vote set is stored as one row per voter in the votes table. Saving an
entity replaces its rows with the entity's current set.
"""

from collections import defaultdict
from typing import Sequence
from uuid import UUID

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from devforum.domain.model import Vote
from devforum.domain.value import VotableType
from devforum.persistence.mappers import row_to_vote
from devforum.persistence.tables import votes_table


async def fetch_vote_sets(
    session: AsyncSession, votable_type: VotableType, votable_ids: Sequence[UUID]
) -> dict[UUID, list[Vote]]:
    """Fetch vote sets for several entities in a single query.

    Returns:
        Dict mapping votable_id -> votes, in insertion order
    """
    if not votable_ids:
        return {}

    stmt = (
        select(votes_table.c.votable_id, votes_table.c.user_id, votes_table.c.value)
        .where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id.in_(list(votable_ids)),
            )
        )
        .order_by(votes_table.c.created_at, votes_table.c.id)
    )
    result = await session.execute(stmt)

    vote_map: dict[UUID, list[Vote]] = defaultdict(list)
    for row in result.mappings():
        vote_map[row["votable_id"]].append(row_to_vote(dict(row)))
    return vote_map


async def replace_vote_set(
    session: AsyncSession,
    votable_type: VotableType,
    votable_id: UUID,
    votes: Sequence[Vote],
) -> None:
    """Make the stored vote set of an entity equal to votes."""
    await delete_vote_set(session, votable_type, votable_id)
    if votes:
        await session.execute(
            insert(votes_table),
            [
                {
                    "votable_type": votable_type.value,
                    "votable_id": votable_id,
                    "user_id": vote.user_id,
                    "value": int(vote.value),
                }
                for vote in votes
            ],
        )


async def delete_vote_set(
    session: AsyncSession, votable_type: VotableType, votable_id: UUID
) -> None:
    """Remove every vote of an entity."""
    await session.execute(
        delete(votes_table).where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
            )
        )
    )


def vote_count_column(votable_type: VotableType, votable_id_column):
    """Correlated scalar subquery summing an entity's vote values."""
    return (
        select(func.coalesce(func.sum(votes_table.c.value), 0))
        .where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id_column,
            )
        )
        .scalar_subquery()
    )
