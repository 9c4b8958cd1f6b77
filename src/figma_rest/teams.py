"""Figma API - Team and Project Methods."""
from .client import FigmaClient
from .types import GetProjectFilesResult, GetTeamProjectsResult


async def get_team_projects(client: FigmaClient, team_id: str) -> GetTeamProjectsResult:
    """Get projects in a team.

    Args:
        client: Figma client
        team_id: Team ID

    Returns:
        List of projects
    """
    return await client.get(f"teams/{team_id}/projects")


async def get_project_files(
    client: FigmaClient,
    project_id: str,
    branch_data: bool = False
) -> GetProjectFilesResult:
    """Get files in a project.

    Args:
        client: Figma client
        project_id: Project ID
        branch_data: Include branch metadata

    Returns:
        List of files in project
    """
    return await client.get(f"projects/{project_id}/files", params={"branch_data": branch_data})
