"""GraphQL query constants for the GitHub provider."""

GET_ISSUES_OF_REPOSITORY = """
query($organization: String!, $repository: String!, $cursor: String, $first: Int!) {
  organization(login: $organization) {
    name
    url
    repository(name: $repository) {
      id
      name
      url
      stargazerCount
      viewerHasStarred
      issues(first: $first, after: $cursor, states: [OPEN]) {
        edges {
          node { id title url }
        }
        totalCount
        pageInfo { endCursor hasNextPage }
      }
    }
  }
}
"""

SEARCH_ISSUES = """
query($query: String!, $cursor: String, $first: Int!) {
  search(first: $first, after: $cursor, type: ISSUE, query: $query) {
    issueCount
    pageInfo { hasNextPage endCursor }
    edges {
      node {
        ... on Issue { id createdAt title url repository { name } }
        ... on PullRequest { id createdAt title url repository { name } }
      }
    }
  }
}
"""
