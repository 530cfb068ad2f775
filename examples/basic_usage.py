"""
Basic usage of dynamodb-util.

Expects a table with a string partition key "PK" and string sort key "SK",
named by DYNAMODB_TABLE, plus either COGNITO_IDENTITY_POOL_ID or
AWS_ACCESS_KEY_ID/AWS_SECRET_ACCESS_KEY in the environment (or a .env file).

For DynamoDB Local:
    DYNAMODB_TABLE=items python examples/basic_usage.py --local
"""

import logging
import sys

import dynamodb_util
from dynamodb_util import DynamoDBConfig, DynamoDBUtilError, build_key

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")


def main():
    if "--local" in sys.argv:
        dynamodb_util.init(DynamoDBConfig.for_local_development())
    else:
        dynamodb_util.init()

    # Store and read back a value
    dynamodb_util.put({"name": "A", "age": 1}, "user#1", "profile")
    print(dynamodb_util.get("user#1", "profile"))

    # Several items in one partition, read back in sort-key order
    for day in ("2024-02-24", "2024-02-25"):
        dynamodb_util.put({"lastLogin": f"{day}T08:00:00Z"}, "user#1", f"login#{day}")

    items, last_key = dynamodb_util.query_items(
        "PK = :pk AND begins_with(SK, :prefix)",
        {":pk": "user#1", ":prefix": "login#"}
    )
    for item in items:
        print(item["SK"], item["JSON"])
    if last_key:
        print("more logins available from", last_key)

    # Attribute-level update beside the JSON payload
    dynamodb_util.update_item(
        build_key("user#1", "profile"),
        "ADD #logins :one",
        {":one": 1},
        attribute_names={"#logins": "login_count"}
    )

    dynamodb_util.delete_item(build_key("user#1", "login#2024-02-24"))


if __name__ == "__main__":
    try:
        main()
    except DynamoDBUtilError as e:
        print(f"dynamodb-util error: {e}", file=sys.stderr)
        sys.exit(1)
