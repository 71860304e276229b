"""
Authenticated usage - Encrypted credential headers and item creation
"""
from sitecore_webapi import (
    AuthenticatedSitecoreDataContext,
    SitecoreCredentials,
    ItemQuery,
    QueryType,
    setup_logging
)


def main():
    setup_logging()

    # Without TLS the credentials are encrypted with the server's public key
    credentials = SitecoreCredentials("sitecore\\admin", "b", encrypt_headers=True)

    with AuthenticatedSitecoreDataContext("cms.example.com", credentials) as context:

        query = ItemQuery(
            query_type=QueryType.CREATE,
            item_path="/sitecore/content/Home",
            database="master",
            item_name="News",
            template="Sample/Sample Item",
            fields_to_update={"Title": "Latest news"}
        )
        response = context.get_response(query)

        print(f"Create: {response.status_code} {response.status_description}")
        for item in response.items:
            print(f"  Created {item.item_id} at {item.path}")


if __name__ == "__main__":
    main()
