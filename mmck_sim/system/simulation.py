"""Simulation engine tying arrivals, the waiting line and the service pool together."""

import logging
from typing import Iterator, List, Tuple

from mmck_sim.core import ArrivalProcess, CustomerRecord, ServicePool, TraceExhausted, WaitingLine

log = logging.getLogger(__name__)


class Simulation:
    """Generates one complete customer record per call to ``next()``.

    There is no event list. The arrival process, every seat and every
    server keep their own clock, and a customer's whole trajectory is
    worked out the moment they arrive.

    Iterating over a simulation stops cleanly when a finite arrival source
    such as a trace runs out; ``next()`` and ``run()`` raise
    ``TraceExhausted`` instead.
    """

    def __init__(self, arrival: ArrivalProcess, line: WaitingLine, service: ServicePool):
        self.arrival = arrival
        self.line = line
        self.service = service
        self.customers = 0

    def next(self) -> CustomerRecord:
        """Simulate the next arriving customer."""
        t0 = self.arrival.advance()
        self.customers += 1
        line_ready = self.line.earliest_available()
        if t0 < line_ready:
            log.debug("customer %d rejected at %g (line full until %g)",
                      self.customers, t0, line_ready)
            return CustomerRecord.rejected_at(t0)

        server_ready = self.service.earliest_available()
        t1, seat_id = self.line.wait_or_pass(t0, server_ready)
        t2, server_id = self.service.serve(t1)
        return CustomerRecord(
            arrival_time=t0,
            accepted=True,
            service_start_time=t1,
            departure_time=t2,
            seat_id=seat_id,
            server_id=server_id,
        )

    def __next__(self) -> CustomerRecord:
        try:
            return self.next()
        except TraceExhausted:
            raise StopIteration from None

    def __iter__(self) -> Iterator[CustomerRecord]:
        return self

    def run(self, n: int) -> Iterator[CustomerRecord]:
        """Yield the next ``n`` customers in arrival order."""
        for _ in range(n):
            yield self.next()

    def split(self, n: int) -> Tuple[List[CustomerRecord], List[CustomerRecord]]:
        """Simulate ``n`` customers and return (rejected, departed)."""
        rejected, departed = [], []
        for customer in self.run(n):
            if customer.accepted:
                departed.append(customer)
            else:
                rejected.append(customer)
        return rejected, departed
