"""Static table of technical and behavioral concepts.

Each canonical concept carries the synonyms and related terms that count as
mentioning it, plus an importance weight from 1 to 3. The table is built once
at import and exposed read-only.
"""
from types import MappingProxyType
from typing import List, Mapping, NamedTuple, Tuple


class ConceptEntry(NamedTuple):
    synonyms: Tuple[str, ...]
    related: Tuple[str, ...]
    weight: int


def _entry(synonyms, related, weight):
    return ConceptEntry(tuple(synonyms), tuple(related), weight)


_CONCEPTS = {
    # System design
    "scalability": _entry(
        ["scale", "scaling", "scalable", "scales"],
        ["horizontal scaling", "vertical scaling", "elastic", "growth", "capacity"], 3),
    "load balancer": _entry(
        ["load balancing", "lb", "balancer"],
        ["nginx", "haproxy", "round robin", "traffic distribution", "reverse proxy"], 3),
    "caching": _entry(
        ["cache", "cached", "caches"],
        ["redis", "memcached", "cdn", "in-memory", "ttl", "invalidation"], 3),
    "database": _entry(
        ["db", "databases", "data store", "datastore"],
        ["sql", "nosql", "postgres", "mysql", "mongodb", "dynamodb", "storage"], 3),
    "microservices": _entry(
        ["microservice", "micro-services", "micro service"],
        ["distributed", "service-oriented", "soa", "decoupled", "modular"], 2),
    "api": _entry(
        ["apis", "endpoint", "endpoints"],
        ["rest", "graphql", "grpc", "interface", "contract"], 2),
    "availability": _entry(
        ["available", "uptime"],
        ["high availability", "ha", "redundancy", "failover", "fault tolerance", "99.9%", "sla"], 3),
    "latency": _entry(
        ["delay", "response time"],
        ["milliseconds", "ms", "fast", "slow", "performance", "speed"], 2),
    "throughput": _entry(
        ["bandwidth", "capacity"],
        ["requests per second", "rps", "qps", "tps", "volume"], 2),
    "consistency": _entry(
        ["consistent"],
        ["eventual consistency", "strong consistency", "cap theorem", "acid", "base"], 2),
    "partition tolerance": _entry(
        ["partitioning", "network partition"],
        ["cap theorem", "distributed", "split brain"], 2),
    "replication": _entry(
        ["replicate", "replicas", "replica"],
        ["master-slave", "primary-secondary", "sync", "async", "copies"], 2),
    "sharding": _entry(
        ["shard", "shards", "partitioning"],
        ["horizontal partitioning", "distribute data", "hash", "range"], 2),
    "message queue": _entry(
        ["queue", "messaging", "message broker"],
        ["kafka", "rabbitmq", "sqs", "pub/sub", "async", "decoupling"], 2),
    "cdn": _entry(
        ["content delivery network", "edge"],
        ["cloudfront", "akamai", "cloudflare", "static content", "caching"], 2),

    # DevOps and cloud
    "kubernetes": _entry(
        ["k8s", "kube"],
        ["container orchestration", "pods", "deployment", "service", "ingress"], 3),
    "docker": _entry(
        ["containers", "containerization"],
        ["image", "dockerfile", "compose", "registry"], 2),
    "ci/cd": _entry(
        ["cicd", "ci cd", "continuous integration", "continuous deployment"],
        ["pipeline", "jenkins", "github actions", "automation", "build"], 2),
    "monitoring": _entry(
        ["monitor", "observability"],
        ["metrics", "logging", "alerting", "prometheus", "grafana", "datadog"], 2),
    "terraform": _entry(
        ["infrastructure as code", "iac"],
        ["provisioning", "cloudformation", "pulumi", "declarative"], 2),
    "aws": _entry(
        ["amazon web services", "amazon"],
        ["ec2", "s3", "lambda", "rds", "cloud"], 2),

    # Configuration management
    "ansible": _entry(
        ["ansible playbook", "playbooks"],
        ["configuration management", "automation", "yaml", "tasks", "roles", "inventory", "agentless"], 3),
    "puppet": _entry(
        ["puppet manifest", "manifests"],
        ["configuration management", "catalog", "agent", "master", "declarative", "dsl"], 3),
    "chef": _entry(
        ["chef cookbook", "cookbooks"],
        ["configuration management", "recipes", "ruby", "knife"], 2),
    "idempotency": _entry(
        ["idempotent", "idempotence"],
        ["repeatable", "same result", "safe to run", "convergent", "desired state"], 3),
    "declarative": _entry(
        ["declarative state", "desired state"],
        ["what not how", "state", "configuration", "manifest", "spec"], 2),
    "procedural": _entry(
        ["imperative", "procedural approach"],
        ["step by step", "how", "scripts", "sequence"], 2),
    "zero downtime": _entry(
        ["zero-downtime", "no downtime"],
        ["rolling update", "blue-green", "canary", "seamless", "continuous"], 3),
    "rolling update": _entry(
        ["rolling deployment", "rolling upgrade"],
        ["gradual", "incremental", "one at a time", "batch"], 2),
    "blue-green deployment": _entry(
        ["blue green", "blue-green"],
        ["switch", "cutover", "parallel", "instant rollback"], 2),
    "canary deployment": _entry(
        ["canary release", "canary"],
        ["gradual rollout", "percentage", "traffic splitting", "testing in production"], 2),
    "migration": _entry(
        ["migrate", "migrating", "transition"],
        ["move", "transfer", "upgrade", "convert", "switch"], 2),
    "check mode": _entry(
        ["dry run", "dry-run", "noop"],
        ["preview", "test", "simulation", "what-if", "safe"], 2),
    "modules": _entry(
        ["module", "reusable"],
        ["components", "library", "package", "abstraction"], 2),
    "catalog": _entry(
        ["catalog compilation"],
        ["puppet", "manifest", "resources", "dependency graph"], 2),

    # Security
    "authentication": _entry(
        ["auth", "authn", "login"],
        ["oauth", "jwt", "token", "credentials", "identity", "sso"], 2),
    "authorization": _entry(
        ["authz", "permissions"],
        ["rbac", "acl", "access control", "roles", "policies"], 2),
    "encryption": _entry(
        ["encrypt", "encrypted"],
        ["ssl", "tls", "https", "at rest", "in transit", "aes"], 2),

    # Behavioral
    "communication": _entry(
        ["communicate", "communicating"],
        ["discuss", "explain", "present", "share", "collaborate", "meeting"], 3),
    "leadership": _entry(
        ["lead", "leading", "leader"],
        ["mentor", "guide", "influence", "decision", "responsibility"], 3),
    "teamwork": _entry(
        ["team", "collaboration", "collaborate"],
        ["together", "group", "cross-functional", "stakeholder"], 3),
    "problem solving": _entry(
        ["solve", "solving", "solution"],
        ["analyze", "debug", "troubleshoot", "investigate", "root cause"], 3),
    "conflict resolution": _entry(
        ["conflict", "disagreement", "resolve"],
        ["mediate", "compromise", "negotiate", "consensus"], 2),
    "prioritization": _entry(
        ["prioritize", "priority", "priorities"],
        ["urgent", "important", "deadline", "trade-off", "focus"], 2),
    "feedback": _entry(
        ["review", "critique"],
        ["constructive", "improve", "learn", "growth"], 2),

    # Algorithms and data structures
    "algorithm": _entry(
        ["algorithms", "algo"],
        ["complexity", "big o", "time complexity", "space complexity", "optimization"], 2),
    "data structure": _entry(
        ["data structures"],
        ["array", "list", "tree", "graph", "hash", "stack", "queue"], 2),
    "complexity": _entry(
        ["time complexity", "space complexity", "big o"],
        ["o(n)", "o(log n)", "o(1)", "efficient", "performance"], 2),

    # Testing
    "testing": _entry(
        ["test", "tests", "tested"],
        ["unit test", "integration test", "e2e", "qa", "quality"], 2),
    "unit testing": _entry(
        ["unit test", "unit tests"],
        ["jest", "pytest", "junit", "mock", "stub", "isolated"], 2),
    "integration testing": _entry(
        ["integration test", "integration tests"],
        ["api testing", "contract testing", "end to end"], 2),

    # Frontend
    "react": _entry(
        ["reactjs", "react.js"],
        ["component", "hooks", "state", "props", "jsx", "virtual dom"], 2),
    "state management": _entry(
        ["state", "global state"],
        ["redux", "context", "zustand", "mobx", "store"], 2),
    "component": _entry(
        ["components", "ui component"],
        ["reusable", "props", "render", "lifecycle"], 2),

    # Backend
    "rest api": _entry(
        ["rest", "restful", "rest apis"],
        ["http", "endpoint", "crud", "json", "status code"], 2),
    "graphql": _entry(
        ["graph ql"],
        ["query", "mutation", "schema", "resolver", "apollo"], 2),
    "orm": _entry(
        ["object relational mapping"],
        ["sequelize", "prisma", "typeorm", "hibernate", "active record"], 2),
}

CONCEPT_KNOWLEDGE: Mapping[str, ConceptEntry] = MappingProxyType(_CONCEPTS)

DEFAULT_WEIGHT = 1


def concept_weight(concept: str) -> int:
    entry = CONCEPT_KNOWLEDGE.get(concept.lower())
    return entry.weight if entry else DEFAULT_WEIGHT


def mentions_concept(text: str, concept: str, entry: ConceptEntry) -> bool:
    """True when the canonical name or any synonym occurs in ``text``."""
    return concept in text or any(s in text for s in entry.synonyms)


def find_known_concepts(text: str) -> List[str]:
    return [c for c, entry in CONCEPT_KNOWLEDGE.items() if mentions_concept(text, c, entry)]
