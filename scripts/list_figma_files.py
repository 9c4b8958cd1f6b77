"""List a Figma team's projects and the files of one project.

This is READ-ONLY - no modifications to Figma files.
"""
import asyncio
import logging
import sys

from dotenv import load_dotenv

from figma_rest import ConfigError, FigmaClient, TransportError, get_project_files, get_team_projects

load_dotenv()


async def main(team_id: str, project_id: str | None = None) -> bool:
    """List projects of a team, then files of the selected project."""
    try:
        client = FigmaClient.from_env()
    except ConfigError as e:
        print(f"❌ Error: {e.message}")
        return False

    async with client:
        print(f"📁 Team {team_id} projects:")
        print("-" * 50)
        try:
            team_data = await get_team_projects(client, team_id)
            projects = team_data.get("projects", [])
            for project in projects:
                marker = "→" if str(project["id"]) == project_id else " "
                print(f"  {marker} [{project['id']}] {project['name']}")
        except TransportError as e:
            print(f"  ❌ Error: {e.status} - {e.message[:100]}")
            return False

        print()

        if project_id is None:
            if not projects:
                return True
            project_id = str(projects[0]["id"])

        print(f"📄 Project {project_id} files:")
        print("-" * 50)
        try:
            project_data = await get_project_files(client, project_id)
            for file in project_data.get("files", []):
                print(f"  📄 {file['name']}")
                print(f"     Key: {file['key']}")
                print(f"     URL: https://www.figma.com/file/{file['key']}")
                print(f"     Modified: {file.get('last_modified', 'N/A')}")
                print()
        except TransportError as e:
            print(f"  ❌ Error: {e.status} - {e.message[:100]}")
            return False
    return True


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)

    if len(sys.argv) < 2:
        print("Usage: python scripts/list_figma_files.py <team-id> [project-id]")
        sys.exit(1)

    success = asyncio.run(main(sys.argv[1], sys.argv[2] if len(sys.argv) > 2 else None))
    sys.exit(0 if success else 1)
