"""Export rendered images for nodes of a Figma file."""
import asyncio
import logging
import sys

from dotenv import load_dotenv

from figma_rest import ConfigError, FigmaClient, TransportError, get_images

load_dotenv()


async def export_images(file_key: str, node_ids: list[str], format: str = "png") -> bool:
    """Print the rendered image URL of every node."""
    print(f"🔄 Rendering {len(node_ids)} node(s) from {file_key} as {format}")

    try:
        async with FigmaClient.from_env() as client:
            result = await get_images(client, file_key, node_ids, format=format)
    except (ConfigError, TransportError) as e:
        print(f"❌ Error: {e.message}")
        return False

    images = result["images"]
    for node_id in dict.fromkeys(node_ids):
        url = images.get(node_id)
        if url:
            print(f"  ✅ {node_id}: {url}")
        else:
            print(f"  ⚠️  {node_id}: not rendered")
    return True


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)

    if len(sys.argv) < 3:
        print("Usage: python scripts/export_images.py <file-key> <node-id> [<node-id> ...]")
        print("Example: python scripts/export_images.py abc123 1:2 1:3")
        sys.exit(1)

    success = asyncio.run(export_images(sys.argv[1], sys.argv[2:]))
    sys.exit(0 if success else 1)
