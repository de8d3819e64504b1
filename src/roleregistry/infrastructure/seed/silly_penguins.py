"""SillyPenguins LLC - example organization."""

from roleregistry.application.dto.role_dto import OrganizationDefinition, RoleDefinition


def build_silly_penguins() -> OrganizationDefinition:
    """Roles of the SillyPenguins LLC example organization."""
    return OrganizationDefinition(
        name="SillyPenguins LLC",
        roles=[
            RoleDefinition(name="Seagull", capabilities=["view_posts"]),
            RoleDefinition(
                name="Penguin",
                capabilities=["create_posts", "comment_posts"],
                includes=["Seagull"],
            ),
            RoleDefinition(
                name="GrandPenguin",
                capabilities=["create_video_posts"],
                includes=["Penguin"],
            ),
            RoleDefinition(
                name="Moderator",
                capabilities=["comment_posts", "modify_comments", "mod_badge"],
                includes=["Seagull"],
            ),
            RoleDefinition(
                name="KingPenguin",
                capabilities=["modify_posts", "crown_badge"],
                includes=["GrandPenguin", "Moderator"],
            ),
        ],
    )
