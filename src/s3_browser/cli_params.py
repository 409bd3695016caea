"""Shared CLI parameter definitions.

Each alias bundles the type, flag name and help text of an option so that
every command exposes the S3 connection options the same way:

    @app.command()
    def my_command(
        region_name: RegionOption = None,
        endpoint_url: EndpointUrlOption = None,
    ):
        pass
"""

from typing import Annotated, Optional

import typer

AccessKeyIdOption = Annotated[
    Optional[str],
    typer.Option("--access-key-id", help="AWS access key ID"),
]

SecretAccessKeyOption = Annotated[
    Optional[str],
    typer.Option("--secret-access-key", help="AWS secret access key"),
]

SessionTokenOption = Annotated[
    Optional[str],
    typer.Option("--session-token", help="AWS session token"),
]

RegionOption = Annotated[
    Optional[str],
    typer.Option(
        "--region",
        help="AWS region name (defaults to AWS_REGION, then us-east-1)",
    ),
]

EndpointUrlOption = Annotated[
    Optional[str],
    typer.Option("--endpoint-url", help="Custom S3 endpoint URL"),
]

AwsProfileOption = Annotated[
    Optional[str],
    typer.Option("--aws-profile", help="AWS CLI profile name"),
]

ExpiresInOption = Annotated[
    Optional[int],
    typer.Option(
        "--expires-in",
        help="Presigned URL lifetime in seconds (defaults to URL_EXPIRES_IN)",
        min=1,
    ),
]
