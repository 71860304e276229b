"""
Basic usage - Read items anonymously
"""
from sitecore_webapi import SitecoreDataContext, ItemQuery, ItemScope


def main():
    with SitecoreDataContext("cms.example.com") as context:

        # Home item and its children
        query = ItemQuery(
            item_path="/sitecore/content/Home",
            scope=[ItemScope.SELF, ItemScope.CHILDREN],
            database="web"
        )
        response = context.get_response(query)

        if not response.succeeded:
            print(f"Failed: {response.status_code} {response.status_description}")
            if response.info and response.info.error_message:
                print(f"  {response.info.error_message}")
            return

        print(f"{response.result_count} items in {response.info.response_time:.3f}s")
        for item in response.items:
            print(f"  {item.path} ({item.template})")


if __name__ == "__main__":
    main()
