"""Command-line interface for s3-browser.

Commands:
    - ls: List the files directly under a folder of a bucket
    - sign: Print a presigned download URL for an object

Paths are given as s3://bucket/prefix.
"""

from typing import Annotated, Optional

import typer

from . import __version__
from .cli_params import (
    AccessKeyIdOption,
    AwsProfileOption,
    EndpointUrlOption,
    ExpiresInOption,
    RegionOption,
    SecretAccessKeyOption,
    SessionTokenOption,
)
from .core import get_settings
from .core.exceptions import ValidationError
from .objectstorage import (
    S3ClientConfig,
    S3ClientManager,
    StorageBrowser,
    create_browser,
)

app = typer.Typer(
    name="s3-browser",
    help="List S3 folders and generate temporary download links.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"s3-browser {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    S3-Browser: folder listings and presigned URLs for S3-compatible storage.
    """
    pass


def _create_browser(
    region_name: Optional[str] = None,
    endpoint_url: Optional[str] = None,
    aws_profile: Optional[str] = None,
    access_key_id: Optional[str] = None,
    secret_access_key: Optional[str] = None,
    session_token: Optional[str] = None,
    expires_in: Optional[int] = None,
) -> StorageBrowser:
    """Create a storage browser, letting CLI options override settings."""
    overrides = {}
    if region_name:
        overrides["region_name"] = region_name
    if expires_in:
        overrides["url_expires_in"] = expires_in
    effective_settings = get_settings().model_copy(update=overrides)

    client_config = S3ClientConfig(
        access_key_id=access_key_id,
        secret_access_key=secret_access_key,
        session_token=session_token,
        region_name=effective_settings.region_name,
        endpoint_url=endpoint_url,
        aws_profile=aws_profile,
    )
    return create_browser(effective_settings, client_config)


@app.command("ls")
def list_cmd(
    path: Annotated[str, typer.Argument(help="Folder to list, s3://bucket/folder/")],
    region_name: RegionOption = None,
    endpoint_url: EndpointUrlOption = None,
    aws_profile: AwsProfileOption = None,
    access_key_id: AccessKeyIdOption = None,
    secret_access_key: SecretAccessKeyOption = None,
    session_token: SessionTokenOption = None,
) -> None:
    """
    List the files directly under a folder, sorted alphabetically.

    Examples:
        s3-browser ls s3://docs-bucket/reports/2024/
        s3-browser ls s3://docs-bucket/reports --aws-profile myprofile
    """
    try:
        bucket, folder_path = S3ClientManager.parse_s3_path(path)
        # Match on folder boundaries, not partial names
        if folder_path and not folder_path.endswith("/"):
            folder_path += "/"

        browser = _create_browser(
            region_name=region_name,
            endpoint_url=endpoint_url,
            aws_profile=aws_profile,
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token,
        )
        for name in browser.list_files_in_folder(bucket, folder_path):
            typer.echo(name)

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("sign")
def sign_cmd(
    path: Annotated[str, typer.Argument(help="Object to sign, s3://bucket/key")],
    expires_in: ExpiresInOption = None,
    region_name: RegionOption = None,
    endpoint_url: EndpointUrlOption = None,
    aws_profile: AwsProfileOption = None,
    access_key_id: AccessKeyIdOption = None,
    secret_access_key: SecretAccessKeyOption = None,
    session_token: SessionTokenOption = None,
) -> None:
    """
    Print a presigned download URL for an object.

    Examples:
        s3-browser sign s3://docs-bucket/reports/2024/a.pdf
        s3-browser sign s3://docs-bucket/a.pdf --expires-in 600
    """
    try:
        bucket, object_key = S3ClientManager.parse_s3_path(path)
        if not object_key:
            raise ValidationError(f"S3 path has no object key: {path}")

        browser = _create_browser(
            region_name=region_name,
            endpoint_url=endpoint_url,
            aws_profile=aws_profile,
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token,
            expires_in=expires_in,
        )
        typer.echo(browser.generate_signed_url(bucket, object_key))

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
