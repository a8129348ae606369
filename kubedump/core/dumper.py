"""Concurrent discovery and dump of all cluster objects."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional

from ..exporters import Exporter, ExportError, get_exporter
from ..k8s import K8sClient, K8sClientError
from ..model.export import DumpOptions, DumpResult
from ..model.kubernetes import APIGroup, GroupVersion, ResourceType, object_name, object_namespace
from ..model.redaction import DEFAULT_POLICY, RedactionPolicy
from ..utils.logger import get_logger
from .filters import skip_item, skip_resource
from .redactor import clean_state

logger = get_logger(__name__)

ProgressCallback = Callable[[DumpResult], None]


class ClusterDumper:
    """Dumps every listable object of a cluster into a directory tree.

    Each (group, version, resource) triple is one unit of work. At most
    ``options.threads`` units list and write at the same time; discovery
    blocks until a slot frees up. Failures are logged and only end the unit
    or object they happened in.
    """

    def __init__(
        self,
        client: K8sClient,
        options: DumpOptions,
        exporter: Optional[Exporter] = None,
        policy: RedactionPolicy = DEFAULT_POLICY,
        progress_callback: Optional[ProgressCallback] = None,
    ):
        self.client = client
        self.options = options
        self.exporter = exporter or get_exporter(options.export_format, options.output_dir)
        self.policy = policy
        self.progress_callback = progress_callback

    def dump(self) -> DumpResult:
        """Run the dump and return the number of written files.

        Raises K8sClientError if the API groups cannot be discovered.
        """
        start = time.monotonic()
        result = DumpResult()

        groups = self.client.get_server_groups()
        logger.info(f"Discovered {len(groups)} API groups")

        slots = threading.BoundedSemaphore(self.options.threads)
        with ThreadPoolExecutor(
            max_workers=self.options.threads, thread_name_prefix="kube-dump"
        ) as pool:
            for group in groups:
                for version in group.versions:
                    self._submit_version(pool, slots, group, version, result)
            # leaving the block waits for every submitted unit

        result.elapsed = time.monotonic() - start
        return result

    def _submit_version(
        self,
        pool: ThreadPoolExecutor,
        slots: threading.BoundedSemaphore,
        group: APIGroup,
        version: GroupVersion,
        result: DumpResult,
    ):
        try:
            resources = self.client.get_api_resources(version.group_version)
        except K8sClientError as e:
            logger.error(f"failed getting resources for {version.group_version!r}: {e.reason}")
            return

        for resource in resources:
            if skip_resource(resource, self.options.resources, self.options.ignore_resources):
                continue

            slots.acquire()
            try:
                pool.submit(self._run_unit, resource, slots, result)
            except BaseException:
                slots.release()
                raise

    def _run_unit(
        self, resource: ResourceType, slots: threading.BoundedSemaphore, result: DumpResult
    ):
        try:
            self.dump_resource(resource, result)
        except Exception:
            logger.exception(f"unexpected failure dumping {resource}")
        finally:
            slots.release()

    def dump_resource(self, resource: ResourceType, result: DumpResult) -> int:
        """List one resource type and write its objects. Returns the files written."""
        logger.info(
            f"processing group={resource.api_group} version={resource.version} "
            f"resource={resource.name}"
        )

        try:
            items = self.client.list_objects(resource)
        except K8sClientError as e:
            logger.error(f"failed listing {resource}: {e.reason}")
            return 0

        written = 0
        for item in items:
            namespace = object_namespace(item)
            if skip_item(
                namespace,
                self.options.namespaced,
                self.options.clusterscoped,
                self.options.namespaces,
                self.options.ignore_namespaces,
            ):
                continue

            logger.debug(
                f"processing manifest group={resource.api_group} version={resource.version} "
                f"resource={resource.name} namespace={namespace} name={object_name(item)!r}"
            )

            if self.options.stateless:
                clean_state(item, self.policy)

            try:
                self.exporter.write(resource.resource_and_group, item)
            except ExportError as e:
                logger.error(f"failed writing {resource} {namespace}/{object_name(item)}: {e}")
                continue

            written += 1
            result.increment()
            if self.progress_callback:
                self.progress_callback(result)

        return written
