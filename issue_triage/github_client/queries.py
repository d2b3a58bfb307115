"""GraphQL documents for GitHub Projects (v2) boards."""

_PROJECT_FIELDS = """
    projectV2(number: $number) {
      id
      title
      fields(first: 20) {
        nodes {
          ... on ProjectV2Field {
            id
            name
          }
          ... on ProjectV2SingleSelectField {
            id
            name
            options {
              id
              name
            }
          }
        }
      }
    }
"""

GET_ORG_PROJECT_FIELDS = (
    """
query getOrgProject($owner: String!, $number: Int!) {
  organization(login: $owner) {"""
    + _PROJECT_FIELDS
    + """  }
}
"""
)

GET_USER_PROJECT_FIELDS = (
    """
query getUserProject($owner: String!, $number: Int!) {
  user(login: $owner) {"""
    + _PROJECT_FIELDS
    + """  }
}
"""
)

GET_ISSUE_PROJECT_ITEMS = """
query getIssueProjectItems($id: ID!, $fieldName: String!) {
  node(id: $id) {
    ... on Issue {
      id
      projectItems(first: 50) {
        nodes {
          id
          project {
            id
            number
          }
          fieldValueByName(name: $fieldName) {
            ... on ProjectV2ItemFieldSingleSelectValue {
              optionId
              name
            }
          }
        }
      }
    }
  }
}
"""

UPDATE_SINGLE_SELECT_FIELD = """
mutation updateSingleSelectField($input: UpdateProjectV2ItemFieldValueInput!) {
  updateProjectV2ItemFieldValue(input: $input) {
    projectV2Item {
      id
    }
  }
}
"""
