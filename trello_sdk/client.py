"""User-facing client for the Trello REST API.

Example usage:
    from trello_sdk import TrelloClient

    async def main():
        client = TrelloClient("your-app-key", "your-user-token")

        # Await the returned task
        board = await client.add_board("Roadmap", "Q4 planning", None)

        # Or pass an error-first callback
        client.get_lists_on_board(board["id"], lambda error, lists: print(error, lists))
"""

import asyncio
from typing import Any

from trello_sdk._internal.dispatch import RequestDispatcher
from trello_sdk._internal.dispatch.dispatcher import Callback

Pending = asyncio.Task[Any] | None


class TrelloClient(RequestDispatcher):
    """Client exposing Trello endpoints as methods.

    Each method builds a path and options, then calls `request`. All of them
    accept an optional trailing `callback`; see `RequestDispatcher.request`
    for the delivery rules.
    """

    # =========================================================================
    # Boards
    # =========================================================================

    def add_board(
        self,
        name: str,
        description: str | None = None,
        organization_id: str | None = None,
        callback: Callback | None = None,
    ) -> Pending:
        """Create a board.

        Args:
            name: Board name.
            description: Optional board description.
            organization_id: Optional organization (team) the board belongs to.
            callback: Optional `callback(error, result)`.
        """
        query: dict[str, Any] = {"name": name}
        if description is not None:
            query["desc"] = description
        if organization_id is not None:
            query["idOrganization"] = organization_id
        return self.request("POST", "/1/boards/", {"query": query}, callback)

    def copy_board(
        self, name: str, source_board_id: str, callback: Callback | None = None
    ) -> Pending:
        """Create a board as a copy of an existing one."""
        query = {"name": name, "idBoardSource": source_board_id}
        return self.request("POST", "/1/boards/", {"query": query}, callback)

    def update_board_pref(
        self, board_id: str, field: str, value: Any, callback: Callback | None = None
    ) -> Pending:
        """Set a single board preference, e.g. "background" or "permissionLevel"."""
        return self.request(
            "PUT", f"/1/boards/{board_id}/prefs/{field}", {"query": {"value": value}}, callback
        )

    def get_boards(self, member_id: str, callback: Callback | None = None) -> Pending:
        """List the boards of a member ("me" for the token owner)."""
        return self.request("GET", f"/1/members/{member_id}/boards", callback=callback)

    def get_board_members(self, board_id: str, callback: Callback | None = None) -> Pending:
        return self.request("GET", f"/1/boards/{board_id}/members", callback=callback)

    def add_member_to_board(
        self,
        board_id: str,
        member_id: str,
        member_type: str,
        callback: Callback | None = None,
    ) -> Pending:
        """Add a member to a board.

        Args:
            board_id: Board to add the member to.
            member_id: Member to add.
            member_type: One of "admin", "normal", "observer".
            callback: Optional `callback(error, result)`.
        """
        return self.request(
            "PUT",
            f"/1/boards/{board_id}/members/{member_id}",
            {"data": {"type": member_type}},
            callback,
        )

    def get_actions_on_board(self, board_id: str, callback: Callback | None = None) -> Pending:
        return self.request("GET", f"/1/boards/{board_id}/actions", callback=callback)

    def get_custom_fields_on_board(
        self, board_id: str, callback: Callback | None = None
    ) -> Pending:
        return self.request("GET", f"/1/boards/{board_id}/customFields", callback=callback)

    def get_labels_for_board(self, board_id: str, callback: Callback | None = None) -> Pending:
        return self.request("GET", f"/1/boards/{board_id}/labels", callback=callback)

    def get_lists_on_board(self, board_id: str, callback: Callback | None = None) -> Pending:
        return self.request("GET", f"/1/boards/{board_id}/lists", callback=callback)

    def get_lists_on_board_by_filter(
        self, board_id: str, filter: str, callback: Callback | None = None
    ) -> Pending:
        """List the lists of a board matching a filter ("open", "closed", "all")."""
        return self.request(
            "GET", f"/1/boards/{board_id}/lists", {"query": {"filter": filter}}, callback
        )

    def get_cards_on_board(self, board_id: str, callback: Callback | None = None) -> Pending:
        return self.request("GET", f"/1/boards/{board_id}/cards", callback=callback)

    def get_cards_on_board_with_extra_params(
        self,
        board_id: str,
        extra_params: dict[str, Any],
        callback: Callback | None = None,
    ) -> Pending:
        """List the cards of a board, passing extra query parameters (e.g. "before")."""
        return self.request(
            "GET", f"/1/boards/{board_id}/cards", {"query": dict(extra_params)}, callback
        )

    # =========================================================================
    # Lists
    # =========================================================================

    def add_list_to_board(
        self, board_id: str, name: str, callback: Callback | None = None
    ) -> Pending:
        return self.request(
            "POST", f"/1/boards/{board_id}/lists", {"query": {"name": name}}, callback
        )

    def rename_list(self, list_id: str, name: str, callback: Callback | None = None) -> Pending:
        """Rename a list."""
        return self.request(
            "PUT", f"/1/lists/{list_id}/name", {"query": {"value": name}}, callback
        )

    def get_cards_on_list(self, list_id: str, callback: Callback | None = None) -> Pending:
        return self.request("GET", f"/1/lists/{list_id}/cards", callback=callback)

    def get_cards_on_list_with_extra_params(
        self,
        list_id: str,
        extra_params: dict[str, Any],
        callback: Callback | None = None,
    ) -> Pending:
        """List the cards of a list, passing extra query parameters (e.g. "before")."""
        return self.request(
            "GET", f"/1/lists/{list_id}/cards", {"query": dict(extra_params)}, callback
        )

    def get_cards_for_list(
        self, list_id: str, actions: str | None = None, callback: Callback | None = None
    ) -> Pending:
        """List the cards of a list, optionally including their actions (e.g. "commentCard")."""
        query = {"actions": actions} if actions is not None else {}
        return self.request("GET", f"/1/lists/{list_id}/cards", {"query": query}, callback)

    # =========================================================================
    # Cards
    # =========================================================================

    def add_card(
        self,
        name: str,
        description: str | None,
        list_id: str,
        callback: Callback | None = None,
    ) -> Pending:
        """Create a card at the bottom of a list.

        Args:
            name: Card name.
            description: Optional card description.
            list_id: List the card is created in.
            callback: Optional `callback(error, result)`.
        """
        query: dict[str, Any] = {"name": name, "idList": list_id}
        if description is not None:
            query["desc"] = description
        return self.request("POST", "/1/cards", {"query": query}, callback)

    def add_card_with_extra_params(
        self,
        name: str,
        extra_params: dict[str, Any],
        list_id: str,
        callback: Callback | None = None,
    ) -> Pending:
        """Create a card with additional fields.

        Args:
            name: Card name.
            extra_params: Extra card fields such as "desc", "due" (date or
                datetime) or "dueComplete".
            list_id: List the card is created in.
            callback: Optional `callback(error, result)`.
        """
        query = {**extra_params, "name": name, "idList": list_id}
        return self.request("POST", "/1/cards", {"query": query}, callback)

    def get_card(self, card_id: str, callback: Callback | None = None) -> Pending:
        return self.request("GET", f"/1/cards/{card_id}", callback=callback)

    def get_card_from_board(
        self, board_id: str, card_id: str, callback: Callback | None = None
    ) -> Pending:
        return self.request("GET", f"/1/boards/{board_id}/cards/{card_id}", callback=callback)

    def delete_card(self, card_id: str, callback: Callback | None = None) -> Pending:
        return self.request("DELETE", f"/1/cards/{card_id}", callback=callback)

    def update_card(
        self, card_id: str, field: str, value: Any, callback: Callback | None = None
    ) -> Pending:
        """Set a single card field, e.g. "name", "desc" or "closed"."""
        return self.request(
            "PUT", f"/1/cards/{card_id}/{field}", {"query": {"value": value}}, callback
        )

    def update_card_name(self, card_id: str, name: str, callback: Callback | None = None) -> Pending:
        return self.update_card(card_id, "name", name, callback)

    def update_card_description(
        self, card_id: str, description: str, callback: Callback | None = None
    ) -> Pending:
        return self.update_card(card_id, "desc", description, callback)

    def update_card_list(
        self, card_id: str, list_id: str, callback: Callback | None = None
    ) -> Pending:
        """Move a card to another list."""
        return self.update_card(card_id, "idList", list_id, callback)

    def add_due_date_to_card(
        self, card_id: str, date_value: Any, callback: Callback | None = None
    ) -> Pending:
        """Set the due date of a card (date, datetime or ISO 8601 string)."""
        return self.update_card(card_id, "due", date_value, callback)

    def add_comment_to_card(
        self, card_id: str, comment: str, callback: Callback | None = None
    ) -> Pending:
        return self.request(
            "POST", f"/1/cards/{card_id}/actions/comments", {"query": {"text": comment}}, callback
        )

    def add_attachment_to_card(
        self, card_id: str, url: str, callback: Callback | None = None
    ) -> Pending:
        """Attach a URL to a card."""
        return self.request(
            "POST", f"/1/cards/{card_id}/attachments", {"query": {"url": url}}, callback
        )

    def add_member_to_card(
        self, card_id: str, member_id: str, callback: Callback | None = None
    ) -> Pending:
        return self.request(
            "POST", f"/1/cards/{card_id}/members", {"query": {"value": member_id}}, callback
        )

    def get_card_stickers(self, card_id: str, callback: Callback | None = None) -> Pending:
        return self.request("GET", f"/1/cards/{card_id}/stickers", callback=callback)

    def add_sticker_to_card(
        self,
        card_id: str,
        image: str,
        left: Any,
        top: Any,
        z_index: Any,
        rotate: Any,
        callback: Callback | None = None,
    ) -> Pending:
        """Place a sticker on a card.

        Args:
            card_id: Card to decorate.
            image: Sticker identifier, e.g. "taco-cool".
            left: Left offset, -60 to 100.
            top: Top offset, -60 to 100.
            z_index: Stacking order.
            rotate: Rotation in degrees.
            callback: Optional `callback(error, result)`.
        """
        data = {
            "image": image,
            "top": top,
            "left": left,
            "zIndex": z_index,
            "rotate": rotate,
        }
        return self.request("POST", f"/1/cards/{card_id}/stickers", {"data": data}, callback)

    # =========================================================================
    # Labels
    # =========================================================================

    def add_label_on_board(
        self, board_id: str, name: str, color: str, callback: Callback | None = None
    ) -> Pending:
        """Create a label on a board."""
        data = {"idBoard": board_id, "name": name, "color": color}
        return self.request("POST", "/1/labels", {"data": data}, callback)

    def add_label_to_card(
        self, card_id: str, label_id: str, callback: Callback | None = None
    ) -> Pending:
        return self.request(
            "POST", f"/1/cards/{card_id}/idLabels", {"data": {"value": label_id}}, callback
        )

    def delete_label_from_card(
        self, card_id: str, label_id: str, callback: Callback | None = None
    ) -> Pending:
        return self.request("DELETE", f"/1/cards/{card_id}/idLabels/{label_id}", callback=callback)

    def delete_label(self, label_id: str, callback: Callback | None = None) -> Pending:
        return self.request("DELETE", f"/1/labels/{label_id}", callback=callback)

    def update_label(
        self, label_id: str, field: str, value: Any, callback: Callback | None = None
    ) -> Pending:
        """Set a single label field ("name" or "color")."""
        return self.request(
            "PUT", f"/1/labels/{label_id}/{field}", {"query": {"value": value}}, callback
        )

    def update_label_name(
        self, label_id: str, name: str, callback: Callback | None = None
    ) -> Pending:
        return self.update_label(label_id, "name", name, callback)

    def update_label_color(
        self, label_id: str, color: str, callback: Callback | None = None
    ) -> Pending:
        return self.update_label(label_id, "color", color, callback)

    # =========================================================================
    # Checklists
    # =========================================================================

    def add_checklist_to_card(
        self, card_id: str, name: str, callback: Callback | None = None
    ) -> Pending:
        return self.request(
            "POST", f"/1/cards/{card_id}/checklists", {"query": {"name": name}}, callback
        )

    def add_existing_checklist_to_card(
        self, card_id: str, checklist_id: str, callback: Callback | None = None
    ) -> Pending:
        """Copy an existing checklist onto a card."""
        return self.request(
            "POST",
            f"/1/cards/{card_id}/checklists",
            {"query": {"idChecklistSource": checklist_id}},
            callback,
        )

    def get_checklists_on_card(self, card_id: str, callback: Callback | None = None) -> Pending:
        return self.request("GET", f"/1/cards/{card_id}/checklists", callback=callback)

    def update_checklist(
        self, checklist_id: str, field: str, value: Any, callback: Callback | None = None
    ) -> Pending:
        """Set a single checklist field, e.g. "name" or "pos"."""
        return self.request(
            "PUT", f"/1/checklists/{checklist_id}/{field}", {"query": {"value": value}}, callback
        )

    def add_item_to_checklist(
        self,
        checklist_id: str,
        name: str,
        pos: Any = "bottom",
        callback: Callback | None = None,
    ) -> Pending:
        """Append an item to a checklist. `pos` is "top", "bottom" or a number."""
        return self.request(
            "POST",
            f"/1/checklists/{checklist_id}/checkItems",
            {"data": {"name": name, "pos": pos}},
            callback,
        )

    # =========================================================================
    # Webhooks
    # =========================================================================

    def add_webhook(
        self,
        description: str,
        callback_url: str,
        id_model: str,
        callback: Callback | None = None,
    ) -> Pending:
        """Register a webhook for the token owner.

        Args:
            description: Webhook description.
            callback_url: URL Trello sends HEAD/POST requests to.
            id_model: Id of the board, list, card or member to watch.
            callback: Optional `callback(error, result)`.
        """
        data = {"description": description, "callbackURL": callback_url, "idModel": id_model}
        return self.request("POST", f"/1/tokens/{self.token}/webhooks/", {"data": data}, callback)

    def delete_webhook(self, webhook_id: str, callback: Callback | None = None) -> Pending:
        return self.request("DELETE", f"/1/webhooks/{webhook_id}", callback=callback)

    # =========================================================================
    # Members and organizations
    # =========================================================================

    def get_member(self, member_id: str, callback: Callback | None = None) -> Pending:
        return self.request("GET", f"/1/members/{member_id}", callback=callback)

    def get_member_cards(self, member_id: str, callback: Callback | None = None) -> Pending:
        return self.request("GET", f"/1/members/{member_id}/cards", callback=callback)

    def get_organizations(self, member_id: str, callback: Callback | None = None) -> Pending:
        """List the organizations (teams) a member belongs to."""
        return self.request("GET", f"/1/members/{member_id}/organizations", callback=callback)

    def get_org_members(self, organization_id: str, callback: Callback | None = None) -> Pending:
        return self.request("GET", f"/1/organizations/{organization_id}/members", callback=callback)

    def get_org_boards(self, organization_id: str, callback: Callback | None = None) -> Pending:
        return self.request("GET", f"/1/organizations/{organization_id}/boards", callback=callback)


def get_client(**kwargs: Any) -> TrelloClient:
    """Get a Trello client configured from environment variables.

    This is a convenience function that returns `TrelloClient.from_env()`.

    Args:
        **kwargs: Extra constructor arguments, e.g. a custom transport.

    Returns:
        A configured TrelloClient instance.

    Raises:
        TrelloConfigError: TRELLO_API_KEY or TRELLO_API_TOKEN is not set.
    """
    return TrelloClient.from_env(**kwargs)  # type: ignore[return-value]
