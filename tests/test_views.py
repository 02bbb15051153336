"""Tests for spinny/services/wheel/views.py."""

from unittest.mock import AsyncMock, MagicMock

from spinny.services.wheel.views import (
    CancelState,
    CancelView,
    create_cancelled_embed,
    create_final_winner_embed,
    create_reinstated_embed,
    wait_for_cancel,
)


ISSUER_ID = 42


def _interaction(user_id: int) -> MagicMock:
    interaction = MagicMock()
    interaction.user.id = user_id
    interaction.user.name = "user"
    interaction.user.display_name = "User"
    interaction.response.send_message = AsyncMock()
    interaction.response.edit_message = AsyncMock()
    interaction.response.defer = AsyncMock()
    return interaction


def _message() -> MagicMock:
    message = MagicMock()
    message.id = 1
    message.edit = AsyncMock()
    return message


# =============================================================================
# CancelView
# =============================================================================

async def test_issuer_passes_interaction_check():
    view = CancelView(ISSUER_ID, timeout=5)
    interaction = _interaction(ISSUER_ID)

    assert await view.interaction_check(interaction) is True
    interaction.response.send_message.assert_not_awaited()


async def test_other_users_are_turned_away_privately():
    view = CancelView(ISSUER_ID, timeout=5)
    interaction = _interaction(7)

    assert await view.interaction_check(interaction) is False
    interaction.response.send_message.assert_awaited_once_with(
        "Only the command issuer can cancel this spin.",
        ephemeral=True,
    )
    assert view.state is CancelState.AWAITING


async def test_cancel_button_stops_view_and_clears_buttons():
    view = CancelView(ISSUER_ID, timeout=5)
    interaction = _interaction(ISSUER_ID)

    await view.cancel.callback(interaction)

    assert view.state is CancelState.CANCELLED
    assert view.is_finished()
    interaction.response.edit_message.assert_awaited_once_with(
        content="🛑 Spin cancelled", view=None,
    )


async def test_cancel_button_is_one_shot():
    view = CancelView(ISSUER_ID, timeout=5)
    first = _interaction(ISSUER_ID)
    second = _interaction(ISSUER_ID)

    await view.cancel.callback(first)
    await view.cancel.callback(second)

    second.response.edit_message.assert_not_awaited()
    second.response.defer.assert_awaited_once()
    assert view.state is CancelState.CANCELLED


async def test_timeout_marks_state():
    view = CancelView(ISSUER_ID, timeout=5)
    await view.on_timeout()
    assert view.state is CancelState.TIMED_OUT


async def test_timeout_after_cancel_keeps_cancelled():
    view = CancelView(ISSUER_ID, timeout=5)
    await view.cancel.callback(_interaction(ISSUER_ID))
    await view.on_timeout()
    assert view.state is CancelState.CANCELLED


# =============================================================================
# wait_for_cancel
# =============================================================================

async def test_wait_for_cancel_returns_true_when_issuer_presses():
    message = _message()
    interaction = _interaction(ISSUER_ID)

    async def attach(view=None, **kwargs):
        if view is not None:
            await view.cancel.callback(interaction)

    message.edit.side_effect = attach

    assert await wait_for_cancel(message, ISSUER_ID, timeout=5) is True
    # Only the attach edit; the button callback already removed the view
    assert message.edit.await_count == 1


async def test_wait_for_cancel_returns_false_and_removes_button():
    message = _message()

    async def attach(view=None, **kwargs):
        if view is not None:
            view.stop()

    message.edit.side_effect = attach

    assert await wait_for_cancel(message, ISSUER_ID, timeout=5) is False
    assert message.edit.await_count == 2
    assert message.edit.await_args_list[-1].kwargs == {"view": None}


async def test_wait_for_cancel_attaches_cancel_view():
    message = _message()
    seen = []

    async def attach(view=None, **kwargs):
        if view is not None:
            seen.append(view)
            view.stop()

    message.edit.side_effect = attach
    await wait_for_cancel(message, ISSUER_ID, timeout=5)

    assert len(seen) == 1
    assert isinstance(seen[0], CancelView)
    assert seen[0].initiator_id == ISSUER_ID
    assert seen[0].timeout == 5


# =============================================================================
# Embeds
# =============================================================================

def test_reinstated_embed():
    embed = create_reinstated_embed("Alice")
    assert "Alice" in embed.description
    assert embed.footer.text is None


def test_final_winner_embed_names_role():
    embed = create_final_winner_embed("Bob", "Pig of the week")
    assert embed.title == "🏆 FINAL WINNER"
    assert "Bob" in embed.description
    assert "Pig of the week" in embed.description


def test_test_mode_embeds_carry_footer():
    assert "TEST MODE" in create_final_winner_embed("Bob", "Pig", test_mode=True).footer.text
    assert "TEST MODE" in create_reinstated_embed("Alice", test_mode=True).footer.text


def test_cancelled_embed():
    assert create_cancelled_embed().title == "🛑 Spin Cancelled"
