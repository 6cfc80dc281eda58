"""
Python Minisat 2.2 core used as the search engine behind pyxsat.

This implementation retains the structure, variable names,
and function names of Minisat 2.2, ensuring consistency with the original C++ version.
It adds per-call conflict/time budgets, literal block distance (glue) of learnt clauses
and a record of learnt unit clauses, which the learnt clause cursor reads back.

Original Minisat License:
MIT License

Copyright (c) 2003-2006, Niklas Een, Niklas Sorensson
Copyright (c) 2007-2010, Niklas Sorensson

Permission is hereby granted, free of charge, to any person obtaining a copy of this software and
associated documentation files (the "Software"), to deal in the Software without restriction,
including without limitation the rights to use, copy, modify, merge, publish, distribute,
sublicense, and/or sell copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all copies or
substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT
NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,
DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT
OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.
"""
import math
import time

from typing import List, Optional


# lbool constants as an enum-like structure
# In Minisat: l_True = 0, l_False = 1, l_Undef = 2
class Lbool:
    TRUE = 0
    FALSE = 1
    UNDEF = 2


def sign(lit) -> bool:
    return lit & 1 == 1


def var(lit) -> int:
    return lit >> 1


def mkLit(var_index: int, sign_bit: bool) -> int:
    return (var_index << 1) + (1 if sign_bit else 0)


# Clause reference
# In Minisat clauses are referenced by indices in ClauseAllocator
class CRef:
    UNDEF = -1


def remove(lst, item):
    for i, x in enumerate(lst):
        if x == item:
            del lst[i]
            return


class VarData:
    def __init__(self, reason: int, level: int):
        self.reason = reason  # Reference to a clause
        self.level = level  # Decision level


class Clause:
    def __init__(self, literals: List[int], learnt: bool = False):
        self.lits = literals
        self._learnt = learnt
        self._activity = 0.0
        self.lbd = 0
        self.cref = CRef.UNDEF

    def size(self) -> int:
        return len(self.lits)

    def learnt(self) -> bool:
        return self._learnt

    def activity(self) -> float:
        return self._activity

    def __getitem__(self, i: int) -> int:
        return self.lits[i]

    def __setitem__(self, i: int, val: int):
        self.lits[i] = val


class ClauseAllocator:
    """
    Clause store indexed by clause reference.

    Freed slots are left empty; watchers of removed clauses are detached
    strictly, so no relocation pass is needed.
    """

    def __init__(self):
        self.db = []

    def alloc(self, ps: List[int], learnt: bool) -> int:
        c = Clause(ps[:], learnt=learnt)
        cref = len(self.db)
        self.db.append(c)
        c.cref = cref
        return cref

    def free(self, cr: int):
        self.db[cr] = None

    def __getitem__(self, cr: int) -> Clause:
        c = self.db[cr] if 0 <= cr < len(self.db) else None
        if c is None:
            raise ValueError(f"Invalid cref {cr} in ClauseAllocator.")
        return c


class Watcher:
    def __init__(self, cref: int, blocker: int):
        self.cref = cref
        self.blocker = blocker

    def __eq__(self, other: 'Watcher') -> bool:
        return self.cref == other.cref


class Watches:
    def __init__(self):
        self.table = {}

    def __getitem__(self, lit: int) -> List[Watcher]:
        if lit not in self.table:
            self.table[lit] = []
        return self.table[lit]

    def init(self, lit: int):
        if lit not in self.table:
            self.table[lit] = []


class VarOrderLt:
    def __init__(self, activity):
        self.activity = activity

    def __call__(self, x, y):
        return self.activity[x] > self.activity[y]


class Heap:
    def __init__(self, comp):
        self.data = []
        self.comp = comp
        self.index = {}  # var -> position in heap, or -1 if not in heap

    def empty(self):
        return len(self.data) == 0

    def inHeap(self, x):
        return x in self.index and self.index[x] != -1

    def percolateUp(self, i):
        x = self.data[i]
        while i > 0:
            p = (i - 1) // 2
            if self.comp(x, self.data[p]):
                self.data[i] = self.data[p]
                self.index[self.data[p]] = i
                i = p
            else:
                break
        self.data[i] = x
        self.index[x] = i

    def percolateDown(self, i):
        x = self.data[i]
        while True:
            l = 2 * i + 1
            r = 2 * i + 2
            best = i

            if l < len(self.data) and self.comp(self.data[l], self.data[best]):
                best = l
            if r < len(self.data) and self.comp(self.data[r], self.data[best]):
                best = r

            if best == i:
                break
            # Swap with the best child
            self.data[i], self.data[best] = self.data[best], self.data[i]
            self.index[self.data[i]] = i
            self.index[self.data[best]] = best
            i = best
        self.data[i] = x
        self.index[x] = i

    def removeMin(self):
        if self.empty():
            return -1
        root = self.data[0]
        last = self.data.pop()
        self.index[root] = -1
        if not self.empty():
            self.data[0] = last
            self.index[last] = 0
            self.percolateDown(0)
        return root

    def build(self, vs):
        for x in self.data:
            self.index[x] = -1
        self.data = vs[:]
        for i, v in enumerate(self.data):
            self.index[v] = i
        for i in range((len(self.data) // 2) - 1, -1, -1):
            self.percolateDown(i)

    def insert(self, x):
        if self.inHeap(x):
            return
        self.data.append(x)
        i = len(self.data) - 1
        self.index[x] = i
        self.percolateUp(i)

    def decrease(self, x):
        # Called after increasing variable's activity to bubble it up
        i = self.index[x]
        self.percolateUp(i)


class MinisatSolver:
    """
    CDCL search core with MiniSat's default configuration: deep conflict
    clause minimisation, full phase saving, Luby restarts and no random
    decisions.
    """

    def __init__(self):
        self.verbosity = 0
        self.var_decay = 0.95
        self.clause_decay = 0.999
        self.restart_first = 100
        self.restart_inc = 2.0

        self.learntsize_factor = 1 / 3
        self.learntsize_inc = 1.1

        self.learntsize_adjust_start_confl = 100
        self.learntsize_adjust_inc = 1.5
        self.lit_Undef = -2

        self.solves = 0
        self.starts = 0
        self.decisions = 0
        self.propagations = 0
        self.conflicts = 0
        self.dec_vars = 0
        self.clauses_literals = 0
        self.learnts_literals = 0
        self.max_literals = 0
        self.tot_literals = 0

        self.ok = True
        self.cla_inc = 1
        self.var_inc = 1
        self.ca = ClauseAllocator()
        self.watches = Watches()
        self.qhead = 0
        self.simpDB_assigns = -1
        self.simpDB_props = 0
        self.activity = []
        self.seen = []
        self.polarity = []
        self.decision = []
        self.trail = []
        self.trail_lim = []
        self.order_heap = Heap(VarOrderLt(self.activity))
        self.progress_estimate = 0

        # Budgets are absolute: conflict count / monotonic deadline, -1 = none
        self.conflict_budget = -1
        self.time_budget = -1.0

        self.model = []
        self.conflict_clause = []
        self.clauses = []
        self.learnts = []
        self.learnt_units = []
        self.assumptions = []
        self.vardata = []
        self.assigns = []
        self.analyze_toclear = []
        self.analyze_stack = []
        self.learntsize_adjust_confl = 0
        self.learntsize_adjust_cnt = 0
        self.max_learnts = 0

    def nAssigns(self) -> int:
        return len(self.trail)

    def nVars(self):
        return len(self.assigns)

    def nClauses(self):
        return len(self.clauses)

    def nLearnts(self):
        return len(self.learnts)

    def value_var(self, x: int) -> int:
        return self.assigns[x]

    def value_lit(self, l: int) -> int:
        val = self.assigns[var(l)]
        if val == Lbool.UNDEF:
            return Lbool.UNDEF
        return val ^ (l & 1)

    def value(self, p: int) -> int:
        return self.value_lit(p)

    def level(self, x: int) -> int:
        return self.vardata[x].level

    def reason(self, x: int) -> int:
        return self.vardata[x].reason

    def decisionLevel(self):
        return len(self.trail_lim)

    def newDecisionLevel(self):
        self.trail_lim.append(len(self.trail))

    def setDecisionVar(self, v: int, b: bool):
        self.decision[v] = b
        if b and self.value_var(v) == Lbool.UNDEF:
            self.order_heap.insert(v)
            self.dec_vars += 1

    def insertVarOrder(self, x: int):
        if self.value_var(x) == Lbool.UNDEF and self.decision[x]:
            self.order_heap.insert(x)

    def varDecayActivity(self):
        self.var_inc *= (1 / self.var_decay)

    def varBumpActivity(self, v: int):
        self.activity[v] += self.var_inc
        if self.activity[v] > 1e100:
            for i in range(len(self.activity)):
                self.activity[i] *= 1e-100
            self.var_inc *= 1e-100
        if self.order_heap.inHeap(v):
            self.order_heap.decrease(v)

    def claDecayActivity(self):
        self.cla_inc *= (1 / self.clause_decay)

    def claBumpActivity(self, c: Clause):
        c._activity += self.cla_inc
        if c._activity > 1e20:
            for cref in self.learnts:
                cc = self.ca[cref]
                cc._activity *= 1e-20
            self.cla_inc *= 1e-20

    def newVar(self, sign_: bool = True, dvar: bool = True) -> int:
        v = self.nVars()
        self.watches.init(mkLit(v, False))
        self.watches.init(mkLit(v, True))
        self.assigns.append(Lbool.UNDEF)
        self.vardata.append(VarData(CRef.UNDEF, 0))
        self.activity.append(0.0)
        self.seen.append(0)
        self.polarity.append(sign_)
        self.decision.append(False)
        self.setDecisionVar(v, dvar)
        return v

    def addClause_(self, ps: List[int]) -> bool:
        assert self.decisionLevel() == 0
        if not self.ok:
            return False
        ps.sort()
        p = self.lit_Undef
        j = 0
        i = 0
        while i < len(ps):
            if self.value(ps[i]) == Lbool.TRUE or (p != self.lit_Undef and ps[i] == (p ^ 1)):
                return True
            elif self.value(ps[i]) != Lbool.FALSE and (p == self.lit_Undef or ps[i] != p):
                ps[j] = ps[i]
                p = ps[i]
                j += 1
            i += 1
        del ps[j:]
        if len(ps) == 0:
            self.ok = False
            return False
        elif len(ps) == 1:
            self.uncheckedEnqueue(ps[0])
            self.ok = (self.propagate() == CRef.UNDEF)
            return self.ok
        else:
            cr = self.ca.alloc(ps, False)
            self.clauses.append(cr)
            self.attachClause(cr)
            return True

    def attachClause(self, cr: int):
        c = self.ca[cr]
        assert c.size() > 1
        self.watches[(c[0] ^ 1)].append(Watcher(cr, c[1]))
        self.watches[(c[1] ^ 1)].append(Watcher(cr, c[0]))
        if c.learnt():
            self.learnts_literals += c.size()
        else:
            self.clauses_literals += c.size()

    def detachClause(self, cr: int):
        c = self.ca[cr]
        assert c.size() > 1
        remove(self.watches[(c[0] ^ 1)], Watcher(cr, c[1]))
        remove(self.watches[(c[1] ^ 1)], Watcher(cr, c[0]))
        if c.learnt():
            self.learnts_literals -= c.size()
        else:
            self.clauses_literals -= c.size()

    def locked(self, clause: Clause) -> bool:
        first_lit = clause.lits[0]
        r = self.reason(var(first_lit))
        return (
                self.value(first_lit) == Lbool.TRUE
                and r != CRef.UNDEF
                and r == clause.cref
        )

    def removeClause(self, cr: int):
        c = self.ca[cr]
        self.detachClause(cr)
        if self.locked(c):
            self.vardata[var(c[0])].reason = CRef.UNDEF
        self.ca.free(cr)

    def satisfied(self, c: Clause) -> bool:
        for lit_ in c.lits:
            if self.value(lit_) == Lbool.TRUE:
                return True
        return False

    def cancelUntil(self, level: int):
        """Undo assignments above ``level``, saving the phase of every unassigned variable."""
        if self.decisionLevel() <= level:
            return
        start = self.trail_lim[level]
        for p in reversed(self.trail[start:]):
            x = var(p)
            self.assigns[x] = Lbool.UNDEF
            self.polarity[x] = sign(p)
            self.insertVarOrder(x)
        self.qhead = start
        del self.trail[start:]
        del self.trail_lim[level:]

    def pickBranchLit(self) -> int:
        """Most active unassigned decision variable, in its saved phase."""
        while not self.order_heap.empty():
            v = self.order_heap.removeMin()
            if self.value_var(v) == Lbool.UNDEF and self.decision[v]:
                return mkLit(v, self.polarity[v])
        return self.lit_Undef

    def analyze(self, confl: int):
        out_learnt = [self.lit_Undef]
        pathC = 0
        p = self.lit_Undef

        index = self.nAssigns() - 1
        while True:
            assert confl != CRef.UNDEF
            c = self.ca[confl]
            if c.learnt():
                self.claBumpActivity(c)
            for j in range(0 if p == self.lit_Undef else 1, c.size()):
                q = c[j]
                if self.seen[var(q)] == 0 and self.level(var(q)) > 0:
                    self.varBumpActivity(var(q))
                    self.seen[var(q)] = 1
                    if self.level(var(q)) >= self.decisionLevel():
                        pathC += 1
                    else:
                        out_learnt.append(q)
            while self.seen[var(self.trail[index])] == 0:
                index -= 1
            p = self.trail[index]
            confl = self.reason(var(p))
            self.seen[var(p)] = 0
            pathC -= 1
            if pathC <= 0:
                break
        out_learnt[0] = p ^ 1

        self.analyze_toclear = out_learnt[:]
        self.max_literals += len(out_learnt)

        # Deep minimisation: drop literals implied by the rest of the clause
        abstract_level = 0
        for q in out_learnt[1:]:
            abstract_level |= 1 << (self.level(var(q)) & 31)
        kept = [out_learnt[0]]
        for q in out_learnt[1:]:
            if self.reason(var(q)) == CRef.UNDEF or not self.litRedundant(q, abstract_level):
                kept.append(q)
        out_learnt = kept
        self.tot_literals += len(out_learnt)

        if len(out_learnt) == 1:
            out_btlevel = 0
        else:
            max_i = 1
            for i in range(2, len(out_learnt)):
                if self.level(var(out_learnt[i])) > self.level(var(out_learnt[max_i])):
                    max_i = i
            p = out_learnt[max_i]
            out_learnt[max_i] = out_learnt[1]
            out_learnt[1] = p
            out_btlevel = self.level(var(p))

        for lit_ in self.analyze_toclear:
            self.seen[var(lit_)] = 0
        return out_learnt, out_btlevel

    def litRedundant(self, p: int, abstract_levels: int) -> bool:
        self.analyze_stack.clear()
        self.analyze_stack.append(p)
        top = len(self.analyze_toclear)
        while len(self.analyze_stack) > 0:
            q = self.analyze_stack.pop()
            r = self.reason(var(q))
            assert r != CRef.UNDEF
            c = self.ca[r]
            for i in range(1, c.size()):
                pp = c[i]
                if self.seen[var(pp)] == 0 and self.level(var(pp)) > 0:
                    if self.reason(var(pp)) != CRef.UNDEF and (
                            (1 << (self.level(var(pp)) & 31)) & abstract_levels) != 0:
                        self.seen[var(pp)] = 1
                        self.analyze_stack.append(pp)
                        self.analyze_toclear.append(pp)
                    else:
                        for j in range(top, len(self.analyze_toclear)):
                            self.seen[var(self.analyze_toclear[j])] = 0
                        del self.analyze_toclear[top:]
                        return False
        return True

    def computeLBD(self, lits: List[int]) -> int:
        """Number of distinct decision levels among the literals (the clause glue)."""
        return len({self.level(var(lit_)) for lit_ in lits})

    def analyzeFinal(self, p: int, out_conflict: List[int]):
        out_conflict.clear()
        out_conflict.append(p)
        if self.decisionLevel() == 0:
            return
        self.seen[var(p)] = 1
        for i in range(self.nAssigns() - 1, self.trail_lim[0] - 1, -1):
            x = var(self.trail[i])
            if self.seen[x]:
                if self.reason(x) == CRef.UNDEF:
                    assert self.level(x) > 0
                    out_conflict.append(self.trail[i] ^ 1)
                else:
                    cc = self.ca[self.reason(x)]
                    for j in range(1, cc.size()):
                        if self.level(var(cc[j])) > 0:
                            self.seen[var(cc[j])] = 1
                self.seen[x] = 0
        self.seen[var(p)] = 0

    def uncheckedEnqueue(self, p: int, from_=CRef.UNDEF):
        assert self.value(p) == Lbool.UNDEF
        self.assigns[var(p)] = Lbool.FALSE if p & 1 else Lbool.TRUE
        self.vardata[var(p)] = VarData(from_, self.decisionLevel())
        self.trail.append(p)

    def propagate(self) -> int:
        confl = CRef.UNDEF
        num_props = 0
        while self.qhead < self.nAssigns():
            p = self.trail[self.qhead]
            self.qhead += 1
            ws = self.watches[p]
            i = 0
            j = 0
            end = len(ws)
            num_props += 1
            while i < end:
                w = ws[i]
                i += 1
                blocker = w.blocker
                if self.value(blocker) == Lbool.TRUE:
                    ws[j] = w
                    j += 1
                    continue
                cr = w.cref
                c = self.ca[cr]
                false_lit = p ^ 1
                if c[0] == false_lit:
                    c[0], c[1] = c[1], c[0]

                assert c[1] == false_lit
                w2 = Watcher(cr, c[0])
                if self.value(c[0]) == Lbool.TRUE:
                    ws[j] = w2
                    j += 1
                    continue
                k = 2
                foundWatch = False
                while k < c.size():
                    if self.value(c[k]) != Lbool.FALSE:
                        c[1] = c[k]
                        c[k] = false_lit
                        self.watches[c[1] ^ 1].append(w2)
                        foundWatch = True
                        break
                    k += 1
                if not foundWatch:
                    ws[j] = w2
                    j += 1
                    if self.value(c[0]) == Lbool.FALSE:
                        confl = cr
                        self.qhead = self.nAssigns()
                        while i < end:
                            ws[j] = ws[i]
                            j += 1
                            i += 1
                    else:
                        self.uncheckedEnqueue(c[0], cr)
            del ws[j:]
        self.propagations += num_props
        self.simpDB_props -= num_props
        return confl

    def reduceDB(self):
        """Drop the less active half of the learnt clauses, keeping binaries and reasons."""
        if not self.learnts:
            return
        extra_lim = self.cla_inc / len(self.learnts)
        self.learnts.sort(key=lambda cr: (self.ca[cr].size() == 2, self.ca[cr].activity()))
        half = len(self.learnts) // 2
        kept = []
        for i, cr in enumerate(self.learnts):
            c = self.ca[cr]
            if c.size() > 2 and not self.locked(c) and (i < half or c.activity() < extra_lim):
                self.removeClause(cr)
            else:
                kept.append(cr)
        self.learnts[:] = kept

    def removeSatisfied(self, cs: List[int]):
        kept = []
        for cr in cs:
            if self.satisfied(self.ca[cr]):
                self.removeClause(cr)
            else:
                kept.append(cr)
        cs[:] = kept

    def rebuildOrderHeap(self):
        self.order_heap.build([v for v in range(self.nVars())
                               if self.decision[v] and self.value_var(v) == Lbool.UNDEF])

    def simplify(self) -> bool:
        """Remove clauses satisfied at the root level. False if the formula is found UNSAT."""
        assert self.decisionLevel() == 0
        if not self.ok or self.propagate() != CRef.UNDEF:
            self.ok = False
            return False
        if self.nAssigns() == self.simpDB_assigns or self.simpDB_props > 0:
            return True
        self.removeSatisfied(self.learnts)
        self.removeSatisfied(self.clauses)

        self.rebuildOrderHeap()
        self.simpDB_assigns = self.nAssigns()
        self.simpDB_props = self.clauses_literals + self.learnts_literals
        return True

    def search(self, nof_conflicts: int):
        assert self.ok
        conflictC = 0
        self.starts += 1
        while True:
            confl = self.propagate()
            if confl != CRef.UNDEF:
                self.conflicts += 1
                conflictC += 1
                if self.decisionLevel() == 0:
                    return Lbool.FALSE

                learnt_clause, backtrack_level = self.analyze(confl)
                lbd = self.computeLBD(learnt_clause)

                self.cancelUntil(backtrack_level)
                if len(learnt_clause) == 1:
                    self.learnt_units.append(learnt_clause[0])
                    self.uncheckedEnqueue(learnt_clause[0])
                else:
                    cr = self.ca.alloc(learnt_clause, True)
                    self.ca[cr].lbd = lbd
                    self.learnts.append(cr)
                    self.attachClause(cr)
                    self.claBumpActivity(self.ca[cr])
                    self.uncheckedEnqueue(learnt_clause[0], cr)
                self.varDecayActivity()
                self.claDecayActivity()

                self.learntsize_adjust_cnt -= 1
                if self.learntsize_adjust_cnt == 0:
                    self.learntsize_adjust_confl *= self.learntsize_adjust_inc
                    self.learntsize_adjust_cnt = int(self.learntsize_adjust_confl)
                    self.max_learnts *= self.learntsize_inc
                    if self.verbosity >= 2:
                        print("| %9d | %7d %8d %8d | %8d %8d %6.0f | %6.3f %% |" % (
                            self.conflicts,
                            self.dec_vars - (len(self.trail_lim) == 0 and self.nAssigns() or self.trail_lim[0]),
                            self.nClauses(), self.clauses_literals,
                            int(self.max_learnts), len(self.learnts),
                            (self.learnts_literals / (len(self.learnts) + 1e-100)), self.progressEstimate() * 100
                        ))
            else:
                if (nof_conflicts >= 0 and conflictC >= nof_conflicts) or not self.withinBudget():
                    self.progress_estimate = self.progressEstimate()
                    self.cancelUntil(0)
                    return Lbool.UNDEF
                if self.decisionLevel() == 0 and not self.simplify():
                    return Lbool.FALSE
                if len(self.learnts) - self.nAssigns() >= self.max_learnts:
                    self.reduceDB()
                next_ = self.lit_Undef
                while self.decisionLevel() < len(self.assumptions):
                    p = self.assumptions[self.decisionLevel()]
                    if self.value(p) == Lbool.TRUE:
                        self.newDecisionLevel()
                    elif self.value(p) == Lbool.FALSE:
                        self.analyzeFinal(p ^ 1, self.conflict_clause)
                        return Lbool.FALSE
                    else:
                        next_ = p
                        break
                if next_ == self.lit_Undef:
                    self.decisions += 1
                    next_ = self.pickBranchLit()
                    if next_ == self.lit_Undef:
                        return Lbool.TRUE
                self.newDecisionLevel()
                self.uncheckedEnqueue(next_)

    def progressEstimate(self) -> float:
        progress = 0.0
        F = 1.0 / self.nVars() if self.nVars() > 0 else 1.0
        for i in range(self.decisionLevel() + 1):
            beg = 0 if i == 0 else self.trail_lim[i - 1]
            end = self.trail_lim[i] if i < self.decisionLevel() else self.nAssigns()
            progress += math.pow(F, i) * (end - beg)
        return progress / self.nVars() if self.nVars() > 0 else 0.0

    def setConfBudget(self, x: int):
        self.conflict_budget = self.conflicts + x

    def setTimeBudget(self, seconds: float):
        self.time_budget = time.monotonic() + seconds

    def budgetOff(self):
        self.conflict_budget = -1
        self.time_budget = -1.0

    def withinBudget(self) -> bool:
        if 0 <= self.conflict_budget <= self.conflicts:
            return False
        return not (self.time_budget >= 0 and time.monotonic() >= self.time_budget)

    def solve_(self, assumps: Optional[List[int]] = None):
        self.model = []
        self.conflict_clause.clear()
        self.assumptions = list(assumps) if assumps else []
        if not self.ok:
            return Lbool.FALSE
        self.solves += 1
        self.max_learnts = self.nClauses() * self.learntsize_factor
        self.learntsize_adjust_confl = self.learntsize_adjust_start_confl
        self.learntsize_adjust_cnt = int(self.learntsize_adjust_confl)
        status = Lbool.UNDEF
        if self.verbosity >= 1:
            print("============================[ Search Statistics ]==============================")
            print("| Conflicts |          ORIGINAL         |          LEARNT          | Progress |")
            print("|           |    Vars  Clauses Literals |    Limit  Clauses Lit/Cl |          |")
            print("===============================================================================")
        curr_restarts = 0
        while status == Lbool.UNDEF:
            status = self.search(int(self.luby(self.restart_inc, curr_restarts) * self.restart_first))
            if not self.withinBudget():
                break
            curr_restarts += 1
        if self.verbosity >= 1:
            print("===============================================================================")
        if status == Lbool.TRUE:
            self.model = [self.value_var(i) for i in range(self.nVars())]
        elif status == Lbool.FALSE and len(self.conflict_clause) == 0:
            self.ok = False
        self.cancelUntil(0)
        self.assumptions = []
        return status

    def luby(self, y: float, x: int) -> float:
        size = 1
        seq = 0
        while size < x + 1:
            seq += 1
            size = 2 * size + 1
        while size - 1 != x:
            size = (size - 1) >> 1
            seq -= 1
            x = x % size
        return math.pow(y, seq)
